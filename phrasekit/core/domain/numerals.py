# phrasekit/core/domain/numerals.py
from __future__ import annotations

from typing import Optional

from phrasekit.core.domain.exceptions import UnsupportedOperationError
from phrasekit.core.ports.localizer import Translator, localize

_NUMBER_WORDS = (
    "zero", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
)


def number_to_words(
    number: int,
    continue_beyond_ten: bool = False,
    translator: Optional[Translator] = None,
) -> str:
    """
    Spell out 0..10 as English words ("three"); other numbers stay as digits.

    Raises:
        UnsupportedOperationError: if `continue_beyond_ten` is requested for
        a number outside 0..10. Only the literal names above are known.
    """
    if 0 <= number < len(_NUMBER_WORDS):
        return localize(_NUMBER_WORDS[number], translator)

    if continue_beyond_ten:
        raise UnsupportedOperationError(
            "number_to_words", f"cannot spell out {number}; only 0 to 10 are known"
        )

    return str(number)
