"""Utility helpers."""

from feedscribe.utils.dates import to_atom_date, to_rss_date, to_utc

__all__ = ["to_atom_date", "to_rss_date", "to_utc"]
