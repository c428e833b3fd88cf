"""Shared fixtures for the rollex test suite."""
from __future__ import annotations

import random
from typing import Callable

import pytest


class ScriptedRandom:
    """Random source that returns preset values, failing if asked for more."""

    def __init__(self, *values: float):
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        if self.calls >= len(self.values):
            raise AssertionError(
                f"random source called {self.calls + 1} times, but only expected {len(self.values)}"
            )
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def forbidden_rng() -> ScriptedRandom:
    """A random source that must never be called."""
    return ScriptedRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(42).random
