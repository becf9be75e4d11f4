"""Utility modules for the word check service."""

from .words import normalize_word

__all__ = ["normalize_word"]
