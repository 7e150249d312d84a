import latexprint
from latexprint.version import get_version


def test_get_version_matches_public_api() -> None:
    assert get_version() == latexprint.__version__
    assert isinstance(latexprint.__version__, str)
