"""Shared fixtures for randpop tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Pin tunables before anything reads Settings()
os.environ["RANDPOP_MAX_COLLECTION_SIZE"] = "3"
os.environ["RANDPOP_LOG_FAILURES"] = "true"
os.environ.pop("RANDPOP_MAX_DEPTH", None)

from randpop.random_values import RandomValues  # noqa: E402
from randpop.settings import Settings  # noqa: E402


@pytest.fixture(scope="session")
def settings():
    return Settings()


@pytest.fixture
def helper(settings):
    return RandomValues(settings=settings)
