# phrasekit/adapters/__init__.py
"""Concrete implementations of the core ports."""

from .translation_table import TranslationTableLocalizer

__all__ = ["TranslationTableLocalizer"]
