# phrasekit/core/domain/terms.py
"""
TERM SELECTOR
-------------

Picks the grammatically correct written form of a countable term for a
signed quantity:

    |quantity| == 1   -> singular   ("box")
    |quantity| == 2   -> dual       ("pair of boxes")
    anything else     -> plural     ("boxes"; zero is plural too)

Term triples are either supplied ad hoc (`select_term`, `quantify`) or
declared once on a domain concept and resolved through the registry
(`select_term_for`):

    @pluralizer("box", "boxes", dual="pair of boxes")
    class Box:
        ...

    @enum_terms(
        CRATE=("crate", "crates"),
        PALLET=TermTriple("pallet", "pallets"),
    )
    class Packaging(Enum):
        CRATE = "crate"
        PALLET = "pallet"

    select_term_for(Box, 2)                  -> "pair of boxes"
    select_term_for(Packaging.CRATE, 0)      -> "crates"

The registry is filled by decorators when concept classes are defined and
is never mutated afterwards; lookups are read-only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

import structlog

from phrasekit.core.domain.exceptions import MissingMetadataError
from phrasekit.core.domain.models import GrammaticalNumber, TermTriple
from phrasekit.core.ports.localizer import Translator, localize
from phrasekit.shared.config import settings

logger = structlog.get_logger()

T = TypeVar("T")

TermSpec = Union[TermTriple, Tuple[str, ...]]


# ---------------------------------------------------------------------------
# Selection rule
# ---------------------------------------------------------------------------


def grammatical_number(quantity: int) -> GrammaticalNumber:
    """Map a signed quantity onto singular / dual / plural."""
    magnitude = abs(quantity)
    if magnitude == 1:
        return GrammaticalNumber.SINGULAR
    if magnitude == 2:
        return GrammaticalNumber.DUAL
    return GrammaticalNumber.PLURAL


def select_term(
    triple: TermTriple,
    quantity: int,
    translator: Optional[Translator] = None,
) -> str:
    """Return the form of `triple` matching `quantity`, localized if asked."""
    return localize(triple.for_number(grammatical_number(quantity)), translator)


def quantify(
    quantity: int,
    singular: str,
    plural: str,
    dual: Optional[str] = None,
    translator: Optional[Translator] = None,
) -> str:
    """
    Ad-hoc form of `select_term` for call sites without a declared triple.

    Example:
        >>> quantify(2, "child", "children")
        'children'
    """
    return select_term(TermTriple(singular, plural, dual or ""), quantity, translator)


def naive_pluralize(word: str) -> str:
    """
    Add "es" to words ending in "s", otherwise "s".

    Only correct for English regular nouns. Declare a TermTriple for
    irregular nouns or other languages.
    """
    return word + "es" if word.lower().endswith("s") else word + "s"


# ---------------------------------------------------------------------------
# Concept registry
# ---------------------------------------------------------------------------

RegistryKey = Union[type, Tuple[type, str]]

_TERM_REGISTRY: Dict[RegistryKey, TermTriple] = {}
_CONCEPTS: Dict[RegistryKey, Any] = {}

TERM_REGISTRY: Mapping[RegistryKey, TermTriple] = MappingProxyType(_TERM_REGISTRY)
"""
Read-only view of the process-wide registry.

Keys are identity keys, not the concepts themselves: a class maps to
itself and an enum member to `(enum class, member name)`. `str`/`int`
enum members compare equal to their values and to same-valued members of
other enums, so they cannot key the registry directly.
"""


def _registry_key(concept: Any) -> Optional[RegistryKey]:
    """Identity key for a concept, or None when it is not a class or enum member."""
    if isinstance(concept, Enum):
        return (type(concept), concept.name)
    if isinstance(concept, type):
        return concept
    return None


def _as_triple(spec: TermSpec) -> TermTriple:
    if isinstance(spec, TermTriple):
        return spec
    return TermTriple(*spec)


def register_terms(concept: Any, triple: TermSpec) -> TermTriple:
    """
    Declare the term triple for a concept (a class or an enum member).

    Raises:
        TypeError: if the concept is neither a class nor an enum member.
        ValueError: if the concept already has a triple. Declarations are
        write-once.
        InvalidArgumentError: if the triple has a blank singular or plural.
    """
    triple = _as_triple(triple)

    key = _registry_key(concept)
    if key is None:
        raise TypeError(f"Terms can only be declared on classes or enum members, not {concept!r}")

    if key in _TERM_REGISTRY:
        raise ValueError(f"Term triple already registered for {concept!r}")

    _TERM_REGISTRY[key] = triple
    _CONCEPTS[key] = concept
    logger.debug(
        "term_triple_registered",
        concept=_concept_name(concept),
        singular=triple.singular,
        plural=triple.plural,
        dual=triple.dual,
    )
    return triple


def pluralizer(
    singular: str,
    plural: str,
    dual: Optional[str] = None,
) -> Callable[[T], T]:
    """
    Class decorator declaring the term triple of the decorated class.

    Usage:

        @pluralizer("person", "people")
        class Person:
            ...
    """
    triple = TermTriple(singular, plural, dual or "")

    def decorator(cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError("@pluralizer can only decorate classes")
        register_terms(cls, triple)
        return cls

    return decorator


def enum_terms(**members: TermSpec) -> Callable[[T], T]:
    """
    Decorator for Enum classes declaring a term triple per member name.

    Values are TermTriple instances or (singular, plural[, dual]) tuples.
    Members left out simply have no declared terms.
    """
    triples = {name: _as_triple(spec) for name, spec in members.items()}

    def decorator(enum_cls: T) -> T:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise TypeError("@enum_terms can only decorate Enum classes")

        unknown = sorted(set(triples) - set(enum_cls.__members__))
        if unknown:
            raise ValueError(
                f"{enum_cls.__name__} has no member(s) named {', '.join(unknown)}"
            )

        for name, triple in triples.items():
            register_terms(enum_cls[name], triple)
        return enum_cls

    return decorator


def has_terms(concept: Any) -> bool:
    return _registry_key(concept) in _TERM_REGISTRY


def term_triple_for(concept: Any) -> TermTriple:
    """
    Resolve the declared triple of a concept.

    Values that merely compare equal to a declared enum member (e.g. the
    `1` of an IntEnum member) are not that member and resolve to nothing.

    Raises:
        MissingMetadataError: if nothing was declared for it.
    """
    key = _registry_key(concept)
    if key is None or key not in _TERM_REGISTRY:
        raise MissingMetadataError(concept)
    return _TERM_REGISTRY[key]


def list_registered_concepts() -> List[Tuple[Any, TermTriple]]:
    """
    Return a snapshot of the current registry as (concept, triple) pairs.

    Pairs rather than a dict, since same-valued members of different
    enums would collide as dict keys. Mainly useful for debugging and
    introspection.
    """
    return [(_CONCEPTS[key], triple) for key, triple in _TERM_REGISTRY.items()]


# ---------------------------------------------------------------------------
# Concept-based resolution
# ---------------------------------------------------------------------------


def _concept_name(concept: Any) -> str:
    if isinstance(concept, Enum):
        return concept.name
    if isinstance(concept, type):
        return concept.__name__
    return str(concept)


def _resolve(concept: Any, naive_fallback: Optional[bool]) -> TermTriple:
    if naive_fallback is None:
        naive_fallback = settings.NAIVE_PLURAL_FALLBACK

    try:
        return term_triple_for(concept)
    except MissingMetadataError:
        if not naive_fallback:
            raise

    name = _concept_name(concept)
    logger.warning("term_triple_missing", concept=name, fallback="naive_pluralize")
    plural = naive_pluralize(name)
    return TermTriple(name, plural, plural)


def get_singular_term(
    concept: Any,
    translator: Optional[Translator] = None,
    naive_fallback: Optional[bool] = None,
) -> str:
    return localize(_resolve(concept, naive_fallback).singular, translator)


def get_plural_term(
    concept: Any,
    translator: Optional[Translator] = None,
    naive_fallback: Optional[bool] = None,
) -> str:
    return localize(_resolve(concept, naive_fallback).plural, translator)


def get_dual_term(
    concept: Any,
    translator: Optional[Translator] = None,
    naive_fallback: Optional[bool] = None,
) -> str:
    return localize(_resolve(concept, naive_fallback).dual, translator)


def select_term_for(
    concept: Any,
    quantity: int,
    translator: Optional[Translator] = None,
    naive_fallback: Optional[bool] = None,
) -> str:
    """
    Select the term declared on `concept` for `quantity`.

    Args:
        concept:
            A class decorated with @pluralizer, or a member of an Enum
            decorated with @enum_terms.
        quantity:
            Signed count; only its absolute value matters.
        translator:
            Optional localization callback for the selected term.
        naive_fallback:
            Derive the terms from the concept's name when nothing is
            declared. None defers to the NAIVE_PLURAL_FALLBACK setting.

    Raises:
        MissingMetadataError: if no triple is declared and no fallback applies.
    """
    return select_term(_resolve(concept, naive_fallback), quantity, translator)
