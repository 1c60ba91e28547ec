"""Shared fixtures for the hyphenize tests."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

import pytest

from hyphenize.engine import PatternEngine
from hyphenize.hyphenator import Hyphenator


class FakeEngine(PatternEngine):
    """Pattern engine returning breakpoints from a lookup table.

    Words missing from the table get no breakpoints, or a breakpoint after
    every character when ``every_char`` is set. Every call is recorded.
    """

    def __init__(self, table: Optional[Dict[str, List[int]]] = None, every_char: bool = False) -> None:
        self.table = table or {}
        self.every_char = every_char
        self.calls: list[str] = []

    def breakpoints(self, word: str) -> List[int]:
        self.calls.append(word)
        if word.lower() in self.table:
            return list(self.table[word.lower()])
        if self.every_char:
            return list(range(1, len(word)))
        return []


@pytest.fixture
def every_char_engine() -> FakeEngine:
    """Engine allowing a break between any two characters."""
    return FakeEngine(every_char=True)


@pytest.fixture
def make_hyphenator() -> Callable[..., Hyphenator]:
    """Factory building a Hyphenator on top of a FakeEngine with '-' as hyphen."""

    def _make(
        table: Optional[Dict[str, List[int]]] = None,
        every_char: bool = False,
        custom: Optional[Dict[str, Sequence[str]]] = None,
        hyphen: str = "-",
        engine: Optional[PatternEngine] = None,
    ) -> Hyphenator:
        return Hyphenator(engine or FakeEngine(table, every_char), hyphen=hyphen, custom=custom)

    return _make
