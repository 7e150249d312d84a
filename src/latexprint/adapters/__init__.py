"""Adapters turning values into LaTeX fragments."""
