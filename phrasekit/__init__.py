"""
phrasekit - text normalization and term selection.

- core/domain/  casing, comma lists, singular/dual/plural term selection
- core/ports/   the optional localization collaborator
- adapters/     a translation-table localizer
- shared/       settings (pydantic-settings) and logging (structlog)

Usage:
    from phrasekit import to_case, CapitalizationStyle, to_comma_list
    from phrasekit import TermTriple, select_term, pluralizer, select_term_for
"""

__version__ = "0.1.0"

from phrasekit.core.domain.casing import (
    is_all_same_case,
    simple_lower,
    simple_upper,
    to_case,
    to_sentence_case,
    to_title_case,
)
from phrasekit.core.domain.exceptions import (
    DomainError,
    InvalidArgumentError,
    MissingMetadataError,
    UnsupportedOperationError,
)
from phrasekit.core.domain.lists import to_comma_list, where_not_blank
from phrasekit.core.domain.models import (
    CapitalizationStyle,
    GrammaticalNumber,
    TermTriple,
)
from phrasekit.core.domain.numerals import number_to_words
from phrasekit.core.domain.strings import (
    append,
    collapse_multiple_spaces,
    collapse_whitespace,
)
from phrasekit.core.domain.terms import (
    enum_terms,
    get_dual_term,
    get_plural_term,
    get_singular_term,
    grammatical_number,
    has_terms,
    list_registered_concepts,
    naive_pluralize,
    pluralizer,
    quantify,
    register_terms,
    select_term,
    select_term_for,
    term_triple_for,
)
from phrasekit.core.ports.localizer import ILocalizer, Translator, localize

__all__ = [
    "__version__",
    # casing
    "CapitalizationStyle",
    "is_all_same_case",
    "simple_lower",
    "simple_upper",
    "to_case",
    "to_sentence_case",
    "to_title_case",
    # lists
    "to_comma_list",
    "where_not_blank",
    # terms
    "GrammaticalNumber",
    "TermTriple",
    "enum_terms",
    "get_dual_term",
    "get_plural_term",
    "get_singular_term",
    "grammatical_number",
    "has_terms",
    "list_registered_concepts",
    "naive_pluralize",
    "pluralizer",
    "quantify",
    "register_terms",
    "select_term",
    "select_term_for",
    "term_triple_for",
    # numerals & strings
    "number_to_words",
    "append",
    "collapse_multiple_spaces",
    "collapse_whitespace",
    # localization
    "ILocalizer",
    "Translator",
    "localize",
    # errors
    "DomainError",
    "InvalidArgumentError",
    "MissingMetadataError",
    "UnsupportedOperationError",
]
