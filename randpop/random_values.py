"""Public entry points — create/populate random instances and scalar values.

``RandomValues`` is the helper tests use to build source objects for
mapping assertions: "does ``dest.title`` come from ``source.name``?" needs a
source whose fields are all set to distinguishable values.

Examples::

    from randpop import RandomValues

    helper = RandomValues().with_max_collection_size(2).with_max_depth(3)

    order = helper.create_random(Order)
    order = helper.create_random(Order, lambda o: setattr(o, "status", Status.OPEN))

    existing = Order.model_construct()
    helper.populate(existing)          # fills in place, returns the same object

    helper.random_int()                # -1188957731
    helper.random_string("sku-")       # 'sku-0b7c1d3e-...'
    helper.random_enum_value(Color)    # Color.GREEN

Tunables default from ``randpop.settings`` (``RANDPOP_MAX_COLLECTION_SIZE``,
``RANDPOP_MAX_DEPTH``); keyword arguments and ``with_*`` setters override
them per helper.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar
from uuid import UUID, uuid4

from randpop import generators as gen
from randpop.classifier import classify
from randpop.errors import InstantiationError
from randpop.guard import try_create, type_name
from randpop.introspect import construct_default
from randpop.populator import GenerationContext, Populator
from randpop.settings import Settings, get_settings
from randpop.types import Kind

T = TypeVar("T")


class RandomValues:
    def __init__(
        self,
        *,
        max_collection_size: int | None = None,
        max_depth: int | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self.max_collection_size: int = settings.max_collection_size
        self.max_depth: int | None = settings.max_depth
        self.log_failures: bool = settings.log_failures
        if max_collection_size is not None:
            self.with_max_collection_size(max_collection_size)
        if max_depth is not None:
            self.with_max_depth(max_depth)

    # ------------------------------------------------------------------
    # Configuration (fluent)
    # ------------------------------------------------------------------

    def with_max_collection_size(self, size: int) -> RandomValues:
        """Upper bound (inclusive) on generated collection lengths."""
        if size < 1:
            raise ValueError(f"max_collection_size must be >= 1, got {size}")
        self.max_collection_size = size
        return self

    def with_max_depth(self, depth: int | None) -> RandomValues:
        """Deepest composite nesting level to populate; ``None`` removes the limit."""
        if depth is not None and depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {depth}")
        self.max_depth = depth
        return self

    def _context(self) -> GenerationContext:
        return GenerationContext(
            rng=random.Random(),
            max_collection_size=self.max_collection_size,
            max_depth=self.max_depth,
            log_failures=self.log_failures,
        )

    # ------------------------------------------------------------------
    # Object graphs
    # ------------------------------------------------------------------

    def populate(self, instance: T) -> T:
        """Fill ``instance``'s eligible fields in place (depth 1) and return it."""
        return Populator(self._context()).populate(instance, type(instance), depth=1)

    def create_random(self, cls: type[T], callback: Callable[[T], Any] | None = None) -> T:
        """Construct ``cls``, populate it, then run ``callback`` for custom overrides.

        Nested types that can't be built are left empty; only a root that
        can't be built raises ``InstantiationError``.
        """
        built = try_create(cls, lambda: construct_default(cls), log=self.log_failures)
        if not built.ok:
            raise InstantiationError(type_name(cls), built.reason or "unknown error") from built.error

        instance = self.populate(built.value)
        if callback is not None:
            callback(instance)
        return instance

    # Long-form aliases
    update_properties_with_random_values = populate
    create_instance_with_random_values = create_random

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def random_value(self, tp: Any) -> Any:
        """One random value of a registered scalar type, ``Enum`` or ``Literal``."""
        c = classify(tp)
        if c.kind is Kind.PRIMITIVE:
            return gen.GENERATORS[c.target](random.Random(), None)
        if c.kind is Kind.ENUM:
            return self.random_enum_value(tp)
        raise ValueError(f"{type_name(tp)} is not a scalar type.")

    def random_enum_value(self, enum_type: Any) -> Any:
        c = classify(enum_type)
        if c.kind is not Kind.ENUM:
            raise ValueError(f"{type_name(enum_type)} is not an Enum type.")
        if not c.choices:
            raise ValueError(f"{type_name(enum_type)} has no values.")
        return gen.random_choice(random.Random(), c.choices)

    def random_bool(self) -> bool:
        return gen.random_bool(random.Random())

    def random_byte(self) -> int:
        return gen.random_byte(random.Random())

    def random_sbyte(self) -> int:
        return gen.random_sbyte(random.Random())

    def random_short(self) -> int:
        return gen.random_short(random.Random())

    def random_ushort(self) -> int:
        return gen.random_ushort(random.Random())

    def random_int(self) -> int:
        return gen.random_int(random.Random())

    def random_uint(self) -> int:
        return gen.random_uint(random.Random())

    def random_long(self) -> int:
        return gen.random_long(random.Random())

    def random_ulong(self) -> int:
        return gen.random_ulong(random.Random())

    def random_float(self) -> float:
        return gen.random_float(random.Random())

    def random_double(self) -> float:
        return gen.random_double(random.Random())

    def random_decimal(self) -> Decimal:
        return gen.random_decimal(random.Random())

    def random_char(self) -> str:
        return gen.random_char(random.Random())

    def random_date(self) -> date:
        return gen.random_date(random.Random())

    def random_datetime(self) -> datetime:
        return gen.random_datetime(random.Random())

    def random_guid(self) -> UUID:
        return gen.random_guid(random.Random())

    def random_bytes(self) -> bytes:
        return gen.random_bytes(random.Random())

    def random_string(self, prefix: str | None = None) -> str:
        """``prefix`` followed by a fresh UUID."""
        return f"{prefix or ''}{uuid4()}"


# ---------------------------------------------------------------------------
# Module-level shortcuts — default-configured helper per call
# ---------------------------------------------------------------------------


def create_random(cls: type[T], callback: Callable[[T], Any] | None = None) -> T:
    return RandomValues().create_random(cls, callback)


def populate(instance: T) -> T:
    return RandomValues().populate(instance)
