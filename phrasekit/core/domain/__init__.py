# phrasekit/core/domain/__init__.py
"""
Domain logic and value objects.

- casing:   capitalization styles (title case, sentence case, ...)
- lists:    natural-language comma lists
- terms:    singular / dual / plural term selection and the concept registry
- numerals: small-number spelling
- strings:  whitespace collapsing and separator-aware concatenation
"""
