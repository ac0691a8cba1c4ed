"""Random object-graph population for mapping tests."""

from randpop.errors import InstantiationError, RandomValuesError
from randpop.populator import GenerationContext, Populator
from randpop.random_values import RandomValues, create_random, populate
from randpop.settings import Settings, get_settings
from randpop.types import (
    Byte,
    Char,
    Float32,
    Int16,
    Int32,
    Int64,
    SByte,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    # Helper
    "RandomValues",
    "create_random",
    "populate",
    # Engine
    "GenerationContext",
    "Populator",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "RandomValuesError",
    "InstantiationError",
    # Width markers
    "Byte",
    "SByte",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "Char",
]
