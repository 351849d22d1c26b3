"""
Pytest configuration and shared fixtures.
"""

import io
from collections.abc import Callable

import pytest


@pytest.fixture
def scripted_input() -> Callable[[list[str]], Callable[[str], str]]:
    """
    Build an input function that replays the given lines.

    Raises EOFError once the lines run out, like input() at end of stdin.
    """

    def factory(lines: list[str]) -> Callable[[str], str]:
        remaining = iter(lines)

        def read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return factory


@pytest.fixture
def out() -> io.StringIO:
    """Captured result stream."""
    return io.StringIO()


@pytest.fixture
def err() -> io.StringIO:
    """Captured error stream."""
    return io.StringIO()
