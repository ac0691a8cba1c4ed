"""Type classifier — maps an annotation to exactly one generation strategy.

Precedence (first match wins):

  1. registered primitive / well-known type (or its ``Optional`` form)
  2. array        — ``tuple[X, ...]``
  3. list         — parameterised mutable sequence (``list[X]``, ``deque[X]``)
  4. enumerable   — any other iterable with exactly one type argument
  5. composite    — any other class that is not an ``Enum``
  6. enum         — ``Enum`` subclass or ``Literal[...]``
  7. unsupported  — caller leaves the field alone

``classify`` is pure: same annotation, same answer.
"""

from __future__ import annotations

import collections
import collections.abc
import inspect
import types
import typing
from enum import Enum
from typing import Annotated, Any, ForwardRef, Literal, Union, get_args, get_origin

from randpop.generators import GENERATORS
from randpop.types import Classification, Kind

_UNION_ORIGINS = (Union, types.UnionType)

# Unparameterised containers: no element type to generate
_BARE_CONTAINERS = (str, bytes, bytearray, list, tuple, dict, set, frozenset, collections.deque)

_ABSTRACT_MODULES = ("collections.abc", "typing")


def unwrap_optional(tp: Any) -> Any:
    """Return ``X`` for ``Optional[X]`` / ``X | None``; other types pass through.

    Unions with more than one non-None member are returned unchanged (and end
    up unsupported).
    """
    if get_origin(tp) in _UNION_ORIGINS:
        members = [a for a in get_args(tp) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return tp


def _is_registered(tp: Any) -> bool:
    try:
        return tp in GENERATORS
    except TypeError:  # unhashable annotation
        return False


def classify(tp: Any) -> Classification:
    tp = unwrap_optional(tp)

    if isinstance(tp, (str, ForwardRef)):
        return Classification.unsupported()

    if _is_registered(tp):
        return Classification(Kind.PRIMITIVE, target=tp)

    # User NewTypes classify as their base type
    if isinstance(tp, typing.NewType):
        return classify(tp.__supertype__)

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        return classify(args[0])

    if origin is Literal:
        return Classification(Kind.ENUM, target=tp, choices=args)

    if origin is not None:
        if inspect.isclass(origin):
            return _classify_generic(origin, args)
        return Classification.unsupported()

    if not inspect.isclass(tp):
        return Classification.unsupported()

    if issubclass(tp, Enum):
        return Classification(Kind.ENUM, target=tp, choices=tuple(tp))

    if issubclass(tp, _BARE_CONTAINERS) or tp.__module__ in _ABSTRACT_MODULES:
        return Classification.unsupported()

    return Classification(Kind.COMPOSITE, target=tp)


def _classify_generic(origin: type, args: tuple) -> Classification:
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return Classification(Kind.ARRAY, target=tuple, element_type=args[0])
        return Classification.unsupported()

    if not issubclass(origin, collections.abc.Iterable):
        # Parameterised user generics (``Box[int]``) populate as their origin class
        if origin is type or origin.__module__ in _ABSTRACT_MODULES or issubclass(origin, Enum):
            return Classification.unsupported()
        return Classification(Kind.COMPOSITE, target=origin)

    if len(args) != 1 or issubclass(origin, (str, bytes, collections.abc.Mapping)):
        return Classification.unsupported()

    if issubclass(origin, collections.abc.MutableSequence):
        return Classification(Kind.LIST, target=_concrete(origin, list), element_type=args[0])

    return Classification(Kind.ENUMERABLE, target=_concrete(origin, tuple), element_type=args[0])


def _concrete(origin: type, fallback: type) -> type:
    """Abstract container origins (``Sequence``, ``MutableSequence``) map to ``fallback``."""
    if inspect.isabstract(origin) or origin.__module__ in _ABSTRACT_MODULES:
        return fallback
    return origin


def is_enum_type(tp: Any) -> bool:
    """True for ``Enum`` subclasses and ``Literal[...]`` annotations."""
    return classify(tp).kind is Kind.ENUM
