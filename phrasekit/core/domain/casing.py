# phrasekit/core/domain/casing.py
"""
CASE TRANSFORMER
----------------

Converts strings between the capitalization styles listed in
`CapitalizationStyle`:

    lowercase                       "king of the north"
    uppercase                       "KING OF THE NORTH"
    title_case                      "King Of The North"
    title_case_except_conjunctions  "King of The North"
    sentence_case                   "King of the north"

Word boundaries are regex word-character runs (`\\b\\w`); there is no
language-aware segmentation here.

Case folding uses simple one-to-one character mapping. Python's
`str.upper()`/`str.lower()` apply full Unicode special casing, which can
change the length of a string ("straße".upper() == "STRASSE"); characters
whose full mapping expands like that are left as they are ("STRAßE").

Mixed-case input is treated as intentionally cased: title casing only
upper-cases word initials and leaves the rest of such a string alone. Input
that is all upper case or all lower case is folded to lower case first.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Union

from phrasekit.core.domain.exceptions import UnsupportedOperationError
from phrasekit.core.domain.models import CapitalizationStyle
from phrasekit.core.ports.localizer import Translator, localize

_WORD_INITIAL = re.compile(r"\b\w")

# Conjunctions only count as separate words preceded by whitespace;
# "'s" / "'t" are possessive and contraction suffixes.
_CONJUNCTIONS = re.compile(r"(\s(of|in|by|and)|'[st])\b", re.IGNORECASE)

_SENTENCE_INITIAL = re.compile(r"(?:^|[.;:])\s*\w")


def _simple_case(value: str, fold: Callable[[str], str]) -> str:
    chars = []
    for char in value:
        mapped = fold(char)
        chars.append(mapped if len(mapped) == 1 else char)
    return "".join(chars)


def simple_upper(value: str) -> str:
    """Upper-case character by character, never changing the string length."""
    return _simple_case(value, str.upper)


def simple_lower(value: str) -> str:
    """Lower-case character by character, never changing the string length."""
    return _simple_case(value, str.lower)


def _upper(match: re.Match) -> str:
    return simple_upper(match.group(0))


def _lower(match: re.Match) -> str:
    return simple_lower(match.group(0))


def is_all_same_case(value: str) -> bool:
    """True when the string has no mixed casing (caseless strings included)."""
    return value == simple_upper(value) or value == simple_lower(value)


def to_title_case(
    value: Optional[str],
    lower_conjunctions: bool = False,
    translator: Optional[Translator] = None,
) -> str:
    """
    Upper-case the first letter of every word.

    Args:
        value:
            Input string. None or "" yields "".
        lower_conjunctions:
            Re-lowercase "of", "in", "by", "and" (when preceded by
            whitespace) and the "'s" / "'t" suffixes after title casing.
        translator:
            Optional localization callback applied before casing.

    Example:
        >>> to_title_case("KING'S LANDING")
        "King'S Landing"
        >>> to_title_case("king's landing", lower_conjunctions=True)
        "King's Landing"
    """
    if not value:
        return ""

    value = localize(value, translator)
    if is_all_same_case(value):
        value = simple_lower(value)

    result = _WORD_INITIAL.sub(_upper, value)

    if lower_conjunctions:
        result = _CONJUNCTIONS.sub(_lower, result)

    return result


def to_sentence_case(
    value: Optional[str],
    translator: Optional[Translator] = None,
) -> str:
    """
    Lower-case everything, then upper-case the first letter of each sentence.

    A sentence starts at the beginning of the string or after ".", ";" or
    ":" followed by any amount of whitespace. A translator, if given, is
    applied before casing.
    """
    if not value:
        return ""

    return _SENTENCE_INITIAL.sub(_upper, simple_lower(localize(value, translator)))


_TRANSFORMS: Dict[CapitalizationStyle, Callable[[str], str]] = {
    CapitalizationStyle.LOWERCASE: simple_lower,
    CapitalizationStyle.UPPERCASE: simple_upper,
    CapitalizationStyle.TITLE_CASE: to_title_case,
    CapitalizationStyle.TITLE_CASE_EXCEPT_CONJUNCTIONS: lambda v: to_title_case(v, True),
    CapitalizationStyle.SENTENCE_CASE: to_sentence_case,
}


def to_case(
    value: Optional[str],
    style: Union[CapitalizationStyle, str],
    translator: Optional[Translator] = None,
) -> str:
    """
    Convert `value` to the given capitalization style.

    Args:
        value:
            Input string. None or "" yields "" for every style.
        style:
            A CapitalizationStyle or its string value (e.g. "sentence_case").
        translator:
            Optional localization callback applied before the transform.

    Raises:
        ValueError: if `style` is a string naming no known style.
        UnsupportedOperationError: if the style has no transform wired up.
    """
    style = CapitalizationStyle(style)

    try:
        transform = _TRANSFORMS[style]
    except KeyError as exc:
        raise UnsupportedOperationError(
            "to_case", f"no transform registered for style '{style.value}'"
        ) from exc

    if not value:
        return ""

    return transform(localize(value, translator))
