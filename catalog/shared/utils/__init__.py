"""Shared helpers (slug generation)."""

from catalog.shared.utils.text import slugify

__all__ = ["slugify"]
