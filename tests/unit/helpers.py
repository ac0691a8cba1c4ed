"""Sample types for unit tests — pydantic models, dataclasses, plain classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from randpop.types import Byte, Char, Float32, Int16, Int64, SByte, UInt16, UInt32, UInt64


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Nothing(Enum):
    pass


# ---------------------------------------------------------------------------
# pydantic models
# ---------------------------------------------------------------------------


class Point(BaseModel):
    x: int = 0
    y: int = 0


class Line(BaseModel):
    start: Point | None = None
    end: Point | None = None


class Recursive(BaseModel):
    name: str | None = None
    child: Recursive | None = None


class Parent(BaseModel):
    label: str | None = None
    child: Child | None = None


class Child(BaseModel):
    label: str | None = None
    parent: Parent | None = None


class Node(BaseModel):
    name: str | None = None
    children: list[Node] = Field(default_factory=list)


class Level3(BaseModel):
    leaf: Point | None = None


class Level2(BaseModel):
    level3: Level3 | None = None


class Level1(BaseModel):
    level2: Level2 | None = None


class GraphEdge(BaseModel):
    target: str = ""
    relation: str = "related"
    weight: float = 1.0


class Resource(BaseModel):
    """Entity-shaped model: ids, timestamps, embedded edges, free-form metadata."""

    id: UUID | None = None
    name: str
    kind: Literal["model", "agent", "tool"] = "model"
    ordinal: int | None = None
    created_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    graph_edges: list[GraphEdge] = Field(default_factory=list)
    metadata: dict = Field(default_factory=dict)
    _cache: dict = {}


class FrozenModel(BaseModel):
    model_config = {"frozen": True}

    label: str = "fixed"


class LinkedModel(BaseModel):
    name: str
    next: LinkedModel
    lookup: dict[str, int]


Parent.model_rebuild()
Child.model_rebuild()


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass
class Address:
    street: str
    city: str
    postcode: UInt32 | None = None


@dataclass
class Order:
    id: UUID
    placed: datetime | None = None
    due: date | None = None
    total: Decimal = Decimal(0)
    status: Color = Color.RED
    billing: Address | None = None
    shipping: Address | None = None
    lines: list[Point] = field(default_factory=list)
    notes: tuple[str, ...] = ()


@dataclass
class Bag:
    numbers: list[int] = field(default_factory=list)
    names: Sequence[str] = ()
    ids: set[UUID] = field(default_factory=set)
    points: tuple[Point, ...] = ()
    queue: deque[int] = field(default_factory=deque)
    lookup: dict[str, int] = field(default_factory=dict)
    raw: list = field(default_factory=list)


@dataclass
class Widths:
    byte: Byte = Byte(0)
    sbyte: SByte = SByte(0)
    short: Int16 = Int16(0)
    ushort: UInt16 = UInt16(0)
    uint: UInt32 = UInt32(0)
    long: Int64 = Int64(0)
    ulong: UInt64 = UInt64(0)
    single: Float32 = Float32(0.0)
    char: Char = Char("")
    blob: bytes = b""
    anything: object = None
    flag: bool = False
    ratio: float = 0.0


@dataclass(frozen=True)
class FrozenTag:
    label: str = "fixed"


@dataclass
class LinkedNode:
    name: str
    next: LinkedNode
    lookup: dict[str, int]


# ---------------------------------------------------------------------------
# Plain classes
# ---------------------------------------------------------------------------


class Account:
    owner: str
    balance: float = 0.0
    kind: ClassVar[str] = "account"
    _secret: str = ""

    def __init__(self):
        self._nickname: str | None = None

    @property
    def nickname(self) -> str | None:
        return self._nickname

    @nickname.setter
    def nickname(self, value: str | None) -> None:
        self._nickname = value

    @property
    def display(self) -> str:
        return f"{self.owner} ({self.balance})"

    def close(self) -> None:
        self.balance = 0.0


# ---------------------------------------------------------------------------
# Types that can't be built
# ---------------------------------------------------------------------------


class NeedsArgs:
    def __init__(self, required: int):
        self.required = required


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Boom:
    def __init__(self):
        raise RuntimeError("boom")


@dataclass
class Holder:
    label: str | None = None
    needs: NeedsArgs | None = None
    shape: Shape | None = None
    booms: list[Boom] = field(default_factory=list)
    count: int = 0
