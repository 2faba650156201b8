# tests/__init__.py
"""
Test Suite for phrasekit.

Organization:
- `core`: casing, comma lists, term selection, numerals, strings, models.
- `adapters`: the translation-table localizer.
- `shared`: settings and logging configuration.
"""
