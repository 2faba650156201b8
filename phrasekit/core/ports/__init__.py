# phrasekit/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the abstract collaborators the core domain calls out
to. Today that is only the localization service: every public function
accepts an optional `Translator` and falls back to the identity mapping.
"""

from .localizer import ILocalizer, Translator, localize

__all__ = [
    "ILocalizer",
    "Translator",
    "localize",
]
