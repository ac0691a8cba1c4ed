"""Best-effort instantiation guard.

Wraps "construct an instance" so a type that can't be built (no usable
constructor, abstract, constructor raised) becomes an absent value plus a
diagnostic line instead of an exception that aborts the whole object graph.

Examples::

    from randpop.guard import try_create

    built = try_create(Widget, lambda: Widget())
    if built.ok:
        widget = built.value
    else:
        print(built.reason)   # "Can't instantiate abstract class Widget ..."
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from randpop.types import Built

logger = logging.getLogger(__name__)

COMPONENT_NAME = "RandomValues"


def type_name(tp: Any) -> str:
    """Fully qualified name for diagnostics (``package.module.Outer.Inner``)."""
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if qualname is None:
        return repr(tp)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


def try_create(tp: Any, factory: Callable[[], Any], *, log: bool = True) -> Built:
    """Run ``factory``; on any ``Exception`` return an absent ``Built`` with the reason."""
    try:
        return Built(value=factory())
    except Exception as e:
        reason = (str(e) or type(e).__name__).rstrip(".")
        if log:
            logger.warning("%s was unable to create a %s instance: %s.", COMPONENT_NAME, type_name(tp), reason)
        return Built(reason=reason, error=e)
