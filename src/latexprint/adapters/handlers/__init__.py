"""Builtin format rules grouped by value category."""
