"""Function basics: maxima, swaps, closures, higher-order calls, deferred cleanup."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import ExitStack
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def maximum(num1: int, num2: int) -> int:
    """Return the larger of two numbers."""
    return num1 if num1 > num2 else num2


def swap(x: T, y: U) -> tuple[U, T]:
    """Return the two values in reverse order."""
    return y, x


def get_sequence() -> Callable[[], int]:
    """Return a counter that yields 1, 2, 3, ... on successive calls."""
    i = 0

    def next_number() -> int:
        nonlocal i
        i += 1
        return i

    return next_number


def calculate(operation: Callable[[int, int], int], x: int, y: int) -> int:
    """Apply a two-argument operation."""
    return operation(x, y)


@dataclass
class Circle:
    """A circle of the given radius."""

    radius: float = 0.0

    def area(self) -> float:
        """Area using pi approximated as 3.14."""
        return 3.14 * self.radius * self.radius


def _returning(log: list[str]) -> int:
    log.append("returnFunc")
    return 1


def _return_and_defer(log: list[str]) -> int:
    try:
        return _returning(log)
    finally:
        log.append("deferFunc")


def defer_order() -> list[str]:
    """Return the order in which steps and deferred cleanups run."""
    log: list[str] = []
    with ExitStack() as stack:
        stack.callback(log.append, "main end")
        log.append("main::hello go 1")
        log.append("main::hello go 2")
        for name in ("func1", "func2", "func3"):
            stack.callback(log.append, name)
        _return_and_defer(log)
    return log