"""Primitive value generators and the read-only type → generator table.

Every generator takes the call's ``random.Random`` and an optional label
prefix and returns one value. Only string-like generators use the prefix;
it keeps generated text traceable to the field that produced it
(``"name1804289383"``, ``"tags[1]846930886"``).

Examples::

    import random
    from randpop.generators import GENERATORS, random_int

    rng = random.Random()
    random_int(rng, None)              # -1188957731
    GENERATORS[str](rng, "title")      # 'title1025202362'
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Any
from uuid import UUID, uuid4

from randpop.types import Byte, Char, Float32, Int16, Int32, Int64, SByte, UInt16, UInt32, UInt64

# (rng, prefix) -> value
Generator = Callable[..., Any]

_INT31_MAX = 2**31 - 1

# Day window either side of today for date/datetime values
_DAY_SPAN = 1000


def _signed(bits: int) -> tuple[int, int]:
    return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def random_bool(rng: random.Random, prefix: str | None = None) -> bool:
    return rng.getrandbits(1) == 1


def random_byte(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(0, 2**8 - 1)


def random_sbyte(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(*_signed(8))


def random_short(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(*_signed(16))


def random_ushort(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(0, 2**16 - 1)


def random_int(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(*_signed(32))


def random_uint(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(0, 2**32 - 1)


def random_long(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(*_signed(64))


def random_ulong(rng: random.Random, prefix: str | None = None) -> int:
    return rng.randint(0, 2**64 - 1)


# ---------------------------------------------------------------------------
# Floating / fixed point — scaled integer draws, not full-range floats
# ---------------------------------------------------------------------------


def random_float(rng: random.Random, prefix: str | None = None) -> float:
    return rng.randrange(10_000_000) / 1000


def random_double(rng: random.Random, prefix: str | None = None) -> float:
    return rng.randrange(1_000_000) / 100


def random_decimal(rng: random.Random, prefix: str | None = None) -> Decimal:
    return Decimal(rng.randrange(1_000_000)) / 100


# ---------------------------------------------------------------------------
# Text, bytes, identifiers, dates
# ---------------------------------------------------------------------------


def random_char(rng: random.Random, prefix: str | None = None) -> str:
    """First character of a stringified non-negative draw (always a digit)."""
    return str(rng.randrange(_INT31_MAX))[0]


def random_string(rng: random.Random, prefix: str | None = None) -> str:
    return f"{prefix or ''}{rng.randrange(_INT31_MAX)}"


def random_bytes(rng: random.Random, prefix: str | None = None) -> bytes:
    """Between 10 and 99 uniformly random bytes."""
    return rng.randbytes(rng.randrange(10, 100))


def random_bytearray(rng: random.Random, prefix: str | None = None) -> bytearray:
    return bytearray(random_bytes(rng, prefix))


def random_guid(rng: random.Random, prefix: str | None = None) -> UUID:
    return uuid4()


def random_date(rng: random.Random, prefix: str | None = None) -> date:
    return date.today() + timedelta(days=rng.randint(-_DAY_SPAN, _DAY_SPAN))


def random_datetime(rng: random.Random, prefix: str | None = None) -> datetime:
    """Midnight of a day within ±1000 days of today; no time-of-day part."""
    return datetime.combine(random_date(rng, prefix), time.min)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


def random_choice(rng: random.Random, choices: Sequence[Any]) -> Any:
    """Uniformly pick one of ``choices``; ``None`` when there are none."""
    if not choices:
        return None
    return rng.choice(list(choices))


# ---------------------------------------------------------------------------
# Registry — built once, never mutated
# ---------------------------------------------------------------------------

GENERATORS: MappingProxyType[Any, Generator] = MappingProxyType(
    {
        bool: random_bool,
        int: random_int,
        float: random_double,
        Decimal: random_decimal,
        str: random_string,
        bytes: random_bytes,
        bytearray: random_bytearray,
        datetime: random_datetime,
        date: random_date,
        UUID: random_guid,
        object: random_string,
        Any: random_string,
        Byte: random_byte,
        SByte: random_sbyte,
        Int16: random_short,
        UInt16: random_ushort,
        Int32: random_int,
        UInt32: random_uint,
        Int64: random_long,
        UInt64: random_ulong,
        Float32: random_float,
        Char: random_char,
    }
)
