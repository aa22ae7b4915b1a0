"""Recursive helpers: factorial, Fibonacci, Newton square root, directory walk."""

from __future__ import annotations

import os
from collections.abc import Iterator

_EPSILON = 1e-9


def factorial(n: int) -> int:
    """Return n! for n >= 0."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values below 2 are returned as-is."""
    if n < 2:
        return n
    return fibonacci(n - 2) + fibonacci(n - 1)


def sqrt(x: float) -> float:
    """Square root by Newton's method, starting from 1.0."""
    if x < 0:
        raise ValueError("square root of a negative number")
    guess, prev = 1.0, 0.0
    while True:
        diff = guess * guess - x
        if diff < _EPSILON and -diff < _EPSILON:
            return guess
        new_guess = (guess + x / guess) / 2
        if new_guess == prev:
            return guess
        guess, prev = new_guess, guess


def walk_dir(directory: str | os.PathLike[str], indent: str = "") -> Iterator[str]:
    """Yield each entry name under ``directory``, sorted, indented by depth.

    Unreadable directories are skipped silently.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return
    for entry in entries:
        yield indent + entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from walk_dir(os.path.join(directory, entry.name), indent + "  ")