# phrasekit/core/ports/localizer.py
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

Translator = Callable[..., str]
"""
Any callable mapping a key (plus optional positional args) to a display string.

Examples:
    translator("and")            -> "et"
    translator("{0} items", 3)   -> "3 éléments"
"""


class ILocalizer(ABC):
    """
    Interface (Port) for the term-lookup / localization service.

    Instances are callable, so an ILocalizer can be passed anywhere a
    `Translator` is accepted.
    """

    @abstractmethod
    def lookup(self, key: str, args: Optional[Sequence[Any]] = None) -> str:
        """Maps a term or literal to its display string."""
        pass

    def __call__(self, key: str, *args: Any) -> str:
        return self.lookup(key, args or None)


def localize(
    value: str,
    translator: Optional[Translator] = None,
    args: Optional[Sequence[Any]] = None,
) -> str:
    """
    Pass a resolved term or literal through an optional translator.

    Without a translator the value is returned unchanged, or with `args`
    substituted positionally (`"{0} of {1}".format(*args)`).
    """
    if translator is None:
        return value.format(*args) if args else value
    if args:
        return translator(value, *args)
    return translator(value)
