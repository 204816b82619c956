"""Utility helpers for former."""

from .dates import parse_date
from .strings import singular, studly, title

__all__ = [
    "parse_date",
    "singular",
    "studly",
    "title",
]
