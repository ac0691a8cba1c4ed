"""Typed building blocks shared by the classifier, generators and populator.

Width markers name the integer/float/char kinds Python folds into ``int``,
``float`` and ``str``. Annotate a field with one of them to get a value drawn
from that width's range::

    from randpop.types import Int16, UInt64

    @dataclass
    class Packet:
        port: UInt16
        sequence: UInt64
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType

# ---------------------------------------------------------------------------
# Width markers
# ---------------------------------------------------------------------------

Byte = NewType("Byte", int)
SByte = NewType("SByte", int)
Int16 = NewType("Int16", int)
UInt16 = NewType("UInt16", int)
Int32 = NewType("Int32", int)
UInt32 = NewType("UInt32", int)
Int64 = NewType("Int64", int)
UInt64 = NewType("UInt64", int)
Float32 = NewType("Float32", float)
Char = NewType("Char", str)


# ---------------------------------------------------------------------------
# Classification — closed set of generation strategies
# ---------------------------------------------------------------------------


class Kind(str, Enum):
    PRIMITIVE = "primitive"
    ARRAY = "array"
    LIST = "list"
    ENUMERABLE = "enumerable"
    COMPOSITE = "composite"
    ENUM = "enum"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Classification:
    """Result of ``classify()``.

    ``target`` is the type the strategy works on: the unwrapped primitive key,
    the composite/enum class, or the concrete container for collections.
    ``element_type`` is set for ARRAY / LIST / ENUMERABLE.
    ``choices`` holds the candidate values for ENUM.
    """

    kind: Kind
    target: Any = None
    element_type: Any = None
    choices: tuple = ()

    @classmethod
    def unsupported(cls) -> Classification:
        return cls(Kind.UNSUPPORTED)


@dataclass(frozen=True)
class FieldSpec:
    """A public, readable, writable, non-method member of a type."""

    name: str
    annotation: Any


@dataclass
class Built:
    """Outcome of a guarded construction: a value, or the reason there is none."""

    value: Any = None
    reason: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None
