# phrasekit/core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from phrasekit.core.domain.exceptions import InvalidArgumentError

# --- Enums ---

class CapitalizationStyle(str, Enum):
    """Capitalization styles understood by the case transformer."""
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    TITLE_CASE = "title_case"
    TITLE_CASE_EXCEPT_CONJUNCTIONS = "title_case_except_conjunctions"
    SENTENCE_CASE = "sentence_case"

    @property
    def description(self) -> str:
        return _STYLE_DESCRIPTIONS[self]


_STYLE_DESCRIPTIONS: Dict[CapitalizationStyle, str] = {
    CapitalizationStyle.LOWERCASE: "All letters lowercase.",
    CapitalizationStyle.UPPERCASE: "All letters uppercase.",
    CapitalizationStyle.TITLE_CASE: (
        "The first letter of every word uppercase; all other letters lowercase."
    ),
    CapitalizationStyle.TITLE_CASE_EXCEPT_CONJUNCTIONS: (
        "The first letter of every word uppercase, except for conjunctions, "
        "which will remain lowercase; all other letters lowercase."
    ),
    CapitalizationStyle.SENTENCE_CASE: (
        "The first letter of every sentence uppercase. All other letters lowercase."
    ),
}


class GrammaticalNumber(str, Enum):
    """Which written form of a term a quantity calls for."""
    SINGULAR = "singular"  # |quantity| == 1
    DUAL = "dual"          # |quantity| == 2
    PLURAL = "plural"      # everything else, zero included

# --- Value Objects ---

def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True)
class TermTriple:
    """
    The singular, plural and dual written forms of a countable noun or phrase.

    Attributes:
        singular:
            Form used for a quantity of exactly one (e.g. "box").
        plural:
            Form used for zero and for anything above two (e.g. "boxes").
        dual:
            Form used for a quantity of exactly two (e.g. "pair of boxes").
            Defaults to `plural` when omitted or blank.

    Raises:
        InvalidArgumentError: if `singular` or `plural` is blank.
    """

    singular: str
    plural: str
    dual: str = field(default="")

    def __post_init__(self) -> None:
        if _is_blank(self.singular):
            raise InvalidArgumentError("singular", kind="blank_singular")
        if _is_blank(self.plural):
            raise InvalidArgumentError("plural", kind="blank_plural")
        if _is_blank(self.dual):
            # Frozen dataclass: bypass __setattr__ for the defaulted field.
            object.__setattr__(self, "dual", self.plural)

    def for_number(self, number: GrammaticalNumber) -> str:
        """Return the written form matching a grammatical number."""
        forms = {
            GrammaticalNumber.SINGULAR: self.singular,
            GrammaticalNumber.DUAL: self.dual,
            GrammaticalNumber.PLURAL: self.plural,
        }
        return forms[GrammaticalNumber(number)]
