# phrasekit/core/domain/lists.py
"""
COMMA LIST FORMATTER
--------------------

Renders a sequence of already realized strings as a comma list:

    ["a"]                 -> "a"
    ["a", "b"]            -> "a, b"
    ["a", "b", "c"]       -> "a, b, c"
    ["a", "b", "c"], and  -> "a, b and c"

There is never a serial comma before "and". Without `say_and_before_final`
the final pair is joined with a plain comma as well.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from phrasekit.core.ports.localizer import Translator, localize

_SEPARATOR = ", "
_CONJUNCTION = "and"


def where_not_blank(items: Optional[Iterable[Optional[str]]]) -> List[str]:
    """Drop None, empty and whitespace-only entries, preserving order."""
    if items is None:
        return []
    return [item for item in items if item is not None and item.strip()]


def to_comma_list(
    items: Optional[Iterable[Optional[str]]],
    say_and_before_final: bool = False,
    translator: Optional[Translator] = None,
) -> str:
    """
    Join items into a comma-separated list.

    Args:
        items:
            Strings to join. None and blank entries are skipped; the
            surviving items are used unmodified.
        say_and_before_final:
            Join the last two items with " and " instead of ", ".
        translator:
            Optional localization callback for the "and" literal.

    Returns:
        The joined list, or "" when nothing survives blank-filtering.
    """
    cleaned = where_not_blank(items)

    n = len(cleaned)
    if n == 0:
        return ""
    if n == 1:
        return cleaned[0]

    *initial, penultimate, last = cleaned
    if say_and_before_final:
        final_pair = f"{penultimate} {localize(_CONJUNCTION, translator)} {last}"
    else:
        final_pair = f"{penultimate}{_SEPARATOR}{last}"

    return _SEPARATOR.join(initial + [final_pair])
