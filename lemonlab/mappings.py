"""Mapping and range helpers: map rendering, powers of two, rune positions, lookups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def format_map(mapping: Mapping[Any, Any]) -> str:
    """Render a mapping as 'map[k:v k:v]' with keys in sorted order."""
    body = " ".join(f"{key}:{mapping[key]}" for key in sorted(mapping))
    return f"map[{body}]"


def powers_of_two(count: int) -> list[int]:
    """Return the first ``count`` powers of two, starting at 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [1 << i for i in range(count)]


def rune_positions(text: str) -> list[tuple[int, str]]:
    """Pair each character with the UTF-8 byte offset at which it starts."""
    positions: list[tuple[int, str]] = []
    offset = 0
    for char in text:
        positions.append((offset, char))
        offset += len(char.encode("utf-8", errors="surrogatepass"))
    return positions


def describe_capitals(mapping: Mapping[str, str]) -> list[str]:
    """Return one '<key> 首都是 <value>' line per entry, in mapping order."""
    return [f"{country} 首都是 {capital}" for country, capital in mapping.items()]


def lookup_site(mapping: Mapping[str, str], key: str) -> str:
    """Report the site stored under ``key`` or that there is none."""
    if key in mapping:
        return f"{key} 的 站点是 {mapping[key]}"
    return f"{key} 站点不存在"