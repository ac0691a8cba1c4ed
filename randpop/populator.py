"""Recursive object-graph populator.

Given a composite type, builds an instance and fills every eligible field
with a random value, recursing through collections and nested composites.

Two gates bound the recursion:

  depth gate — with ``max_depth`` set, a composite deeper than it is skipped
  cycle gate — each composite type remembers the depth it was first seen at
               during this call; later occurrences are built only at that
               same depth (siblings), never deeper (self-reference)

So ``Node.parent: Node`` populates one level and then stops, while
``Order.billing: Address`` and ``Order.shipping: Address`` both populate.

Everything here works on a single ``GenerationContext`` that lives for one
top-level call. Nothing is shared between calls.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from randpop.classifier import classify
from randpop.generators import GENERATORS, random_choice
from randpop.guard import try_create, type_name
from randpop.introspect import construct_default, eligible_fields
from randpop.types import Classification, Kind

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """Per-call state: random source, tunables snapshot, type → first-seen depth."""

    rng: random.Random = field(default_factory=random.Random)
    max_collection_size: int = 3
    max_depth: int | None = None
    log_failures: bool = True
    seen: dict[type, int] = field(default_factory=dict)

    def __post_init__(self):
        if self.max_collection_size < 1:
            raise ValueError(f"max_collection_size must be >= 1, got {self.max_collection_size}")


class Populator:
    """Fills object graphs for one ``GenerationContext``.

    Usage::

        ctx = GenerationContext(max_collection_size=2)
        order = Populator(ctx).populate(Order.model_construct())
    """

    def __init__(self, context: GenerationContext):
        self.context = context

    @property
    def rng(self) -> random.Random:
        return self.context.rng

    # ------------------------------------------------------------------
    # Field assignment
    # ------------------------------------------------------------------

    def populate(self, instance: Any, cls: type | None = None, depth: int = 1) -> Any:
        """Assign a random value to each eligible field of ``instance``.

        Fields that produce no value keep whatever construction left there.
        """
        cls = cls or type(instance)
        for spec in eligible_fields(cls):
            value = self.value_for(spec.annotation, spec.name, depth)
            if value is None:
                continue
            try:
                setattr(instance, spec.name, value)
            except (AttributeError, TypeError, ValueError) as e:
                logger.debug("Could not assign %s.%s: %s", type_name(cls), spec.name, e)
        return instance

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def value_for(self, tp: Any, label: str, depth: int) -> Any:
        """Random value for annotation ``tp``, or ``None`` when none can be made."""
        c = classify(tp)
        match c.kind:
            case Kind.PRIMITIVE:
                return GENERATORS[c.target](self.rng, label)
            case Kind.ARRAY | Kind.LIST | Kind.ENUMERABLE:
                return self.collection(c, label, depth + 1)
            case Kind.COMPOSITE:
                return self.composite(c.target, depth + 1)
            case Kind.ENUM:
                return random_choice(self.rng, c.choices)
            case _:
                logger.debug("No strategy for %s (%r)", label, tp)
                return None

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def collection(self, c: Classification, label: str, depth: int) -> Any:
        """1..max_collection_size elements of ``c.element_type`` in ``c.target``'s shape.

        One element without a value means no collection at all, never a
        partial one.
        """
        count = self.rng.randint(1, self.context.max_collection_size)
        items = []
        for i in range(count):
            item = self.value_for(c.element_type, f"{label}[{i}]", depth)
            if item is None:
                return None
            items.append(item)

        built = try_create(c.target, lambda: c.target(items), log=self.context.log_failures)
        return built.value if built.ok else None

    # ------------------------------------------------------------------
    # Composites
    # ------------------------------------------------------------------

    def should_build(self, cls: type, depth: int) -> bool:
        """Depth gate, then cycle gate. Records ``cls`` on first sight."""
        ctx = self.context
        if ctx.max_depth is not None and depth > ctx.max_depth:
            return False
        first_seen = ctx.seen.setdefault(cls, depth)
        return first_seen == depth

    def composite(self, cls: type, depth: int) -> Any:
        if not self.should_build(cls, depth):
            return None

        built = try_create(cls, lambda: construct_default(cls), log=self.context.log_failures)
        if not built.ok:
            return None
        return self.populate(built.value, cls, depth)
