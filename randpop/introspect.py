"""Field enumeration and default construction for composite types.

Three families are understood, in this order:

  pydantic models — ``model_fields``; built with ``model_construct()``
  dataclasses     — ``dataclasses.fields()``; built via ``__new__`` + defaults
  plain classes   — annotated attributes + get/set properties; built with ``cls()``

Only public (no leading underscore), readable, writable, non-method members
are eligible. Frozen models/dataclasses have no writable fields.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from typing import Any, ClassVar, ForwardRef, get_origin

from pydantic import BaseModel

from randpop.types import FieldSpec

logger = logging.getLogger(__name__)


def _type_hints(obj: Any) -> dict[str, Any]:
    """``get_type_hints`` with a fallback to raw annotations when names don't resolve."""
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug("Unresolved annotations on %r: %s", obj, e)
        return dict(inspect.get_annotations(obj))


def _is_public(name: str) -> bool:
    return not name.startswith("_")


# ---------------------------------------------------------------------------
# Eligible fields
# ---------------------------------------------------------------------------


def eligible_fields(cls: type) -> list[FieldSpec]:
    """Ordered public, readable, writable, non-method members of ``cls``."""
    if issubclass(cls, BaseModel):
        return _model_fields(cls)
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls)
    return _plain_fields(cls)


def _model_fields(cls: type[BaseModel]) -> list[FieldSpec]:
    if cls.model_config.get("frozen"):
        return []
    hints: dict[str, Any] | None = None
    specs = []
    for name, info in cls.model_fields.items():
        if not _is_public(name) or info.frozen:
            continue
        annotation = info.annotation
        if isinstance(annotation, (str, ForwardRef)):
            # Model not rebuilt yet; resolve against the defining module
            hints = hints if hints is not None else _type_hints(cls)
            annotation = hints.get(name, annotation)
        specs.append(FieldSpec(name, annotation))
    return specs


def _dataclass_fields(cls: type) -> list[FieldSpec]:
    if cls.__dataclass_params__.frozen:
        return []
    hints = _type_hints(cls)
    return [
        FieldSpec(f.name, hints.get(f.name, f.type))
        for f in dataclasses.fields(cls)
        if _is_public(f.name)
    ]


def _plain_fields(cls: type) -> list[FieldSpec]:
    specs: dict[str, FieldSpec] = {}

    # Annotated attributes, base classes first so overrides keep their slot
    for klass in reversed(cls.__mro__):
        own = inspect.get_annotations(klass)
        if klass is object or not own:
            continue
        hints = _type_hints(klass)
        for name in own:
            annotation = hints.get(name)
            if not _is_public(name) or get_origin(annotation) is ClassVar or annotation is ClassVar:
                continue
            attr = inspect.getattr_static(cls, name, None)
            if callable(attr) or isinstance(attr, property):
                continue
            specs[name] = FieldSpec(name, annotation)

    # Properties with both a getter and a setter; nearest definition in the MRO wins
    seen: set[str] = set()
    for klass in cls.__mro__:
        for name, attr in vars(klass).items():
            if name in seen or not isinstance(attr, property):
                continue
            seen.add(name)
            if not _is_public(name) or attr.fget is None or attr.fset is None:
                continue
            specs.setdefault(name, FieldSpec(name, _type_hints(attr.fget).get("return")))

    return list(specs.values())


# ---------------------------------------------------------------------------
# Default construction
# ---------------------------------------------------------------------------


def construct_default(cls: type) -> Any:
    """Build an instance of ``cls`` without requiring field arguments.

    Required fields start out as ``None`` so an instance whose fields get no
    value is still complete. Raises whatever the construction path raises;
    callers wrap this in the best-effort guard.
    """
    if issubclass(cls, BaseModel):
        return _construct_model(cls)
    if dataclasses.is_dataclass(cls):
        return _construct_dataclass(cls)
    return cls()


def _construct_model(cls: type[BaseModel]) -> BaseModel:
    instance = cls.model_construct()
    for name, info in cls.model_fields.items():
        if info.is_required():
            # Bypass __setattr__ so fields_set only reflects populated fields
            object.__setattr__(instance, name, None)
    return instance


def _construct_dataclass(cls: type) -> Any:
    instance = cls.__new__(cls)
    for f in dataclasses.fields(cls):
        if f.default is not dataclasses.MISSING:
            object.__setattr__(instance, f.name, f.default)
        elif f.default_factory is not dataclasses.MISSING:
            object.__setattr__(instance, f.name, f.default_factory())
        else:
            object.__setattr__(instance, f.name, None)
    return instance
