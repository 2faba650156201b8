# phrasekit/core/domain/strings.py
"""Whitespace normalization and separator-aware concatenation."""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_RUN = re.compile(r"\s+")
_SPACE_RUN = re.compile(r" +")


def collapse_whitespace(value: str) -> str:
    """Replace every run of whitespace (tabs and newlines included) with one space."""
    return _WHITESPACE_RUN.sub(" ", value)


def collapse_multiple_spaces(value: str) -> str:
    """Replace runs of the space character only; tabs and newlines are kept."""
    return _SPACE_RUN.sub(" ", value)


def append(
    value: Optional[str],
    appendation: Optional[str],
    separator: Optional[str] = "",
) -> str:
    """
    Append `appendation` to `value`, separated by `separator`.

    The separator is only added when neither the end of `value` nor the
    start of `appendation` already provides it; if both do, one copy is
    dropped.

    Example:
        >>> append("/srv/", "/data/lexicon", "/")
        '/srv/data/lexicon'
        >>> append("a", "b", "/")
        'a/b'
    """
    result = value or ""
    appendation = appendation or ""
    separator = separator or ""

    if not appendation:
        return result

    if separator and result.endswith(separator) and appendation.startswith(separator):
        appendation = appendation[len(separator):]

    if not result or result.endswith(separator) or appendation.startswith(separator):
        return result + appendation

    return result + separator + appendation
