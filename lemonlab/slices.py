"""A growable view over a shared backing list with length and capacity."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Any

_ELEMENT_SIZE = 8
_PAGE_SIZE = 8192
_GROWTH_THRESHOLD = 256
_SIZE_CLASSES = (
    0, 8, 16, 24, 32, 48, 64, 80, 96, 112, 128, 144, 160, 176, 192, 208, 224,
    240, 256, 288, 320, 352, 384, 416, 448, 480, 512, 576, 640, 704, 768, 896,
    1024, 1152, 1280, 1408, 1536, 1792, 2048, 2304, 2688, 3072, 3200, 3456,
    4096, 4864, 5376, 6144, 6528, 6784, 6912, 8192, 9472, 9728, 10240, 10880,
    12288, 13568, 14336, 16384, 18432, 19072, 20480, 21760, 24576, 27264,
    28672, 32768,
)


def _round_up_size(nbytes: int) -> int:
    if nbytes <= _SIZE_CLASSES[-1]:
        return _SIZE_CLASSES[bisect.bisect_left(_SIZE_CLASSES, nbytes)]
    return -(-nbytes // _PAGE_SIZE) * _PAGE_SIZE


def _grow(old_cap: int, needed: int) -> int:
    double = old_cap * 2
    if needed > double:
        new_cap = needed
    elif old_cap < _GROWTH_THRESHOLD:
        new_cap = double
    else:
        new_cap = old_cap
        while new_cap < needed:
            new_cap += (new_cap + 3 * _GROWTH_THRESHOLD) >> 2
    return _round_up_size(new_cap * _ELEMENT_SIZE) // _ELEMENT_SIZE


class Slice:
    """A window of ``len`` items over a backing list that holds ``cap`` slots.

    Sub-slices and appends that fit in the capacity share the backing list,
    so writes through one view are seen by the others.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        if items is None:
            self._backing: list[Any] | None = None
            self._offset = self._len = self._cap = 0
        else:
            self._backing = list(items)
            self._offset = 0
            self._len = self._cap = len(self._backing)

    @classmethod
    def make(cls, length: int, capacity: int | None = None) -> Slice:
        """Return a zero-filled slice of ``length`` items and ``capacity`` slots."""
        if capacity is None:
            capacity = length
        if length < 0 or capacity < length:
            raise ValueError(f"invalid length {length} for capacity {capacity}")
        return cls._view([0] * capacity, 0, length, capacity)

    @classmethod
    def _view(cls, backing: list[Any] | None, offset: int, length: int, capacity: int) -> Slice:
        view = cls.__new__(cls)
        view._backing = backing
        view._offset = offset
        view._len = length
        view._cap = capacity
        return view

    @property
    def cap(self) -> int:
        return self._cap

    @property
    def is_nil(self) -> bool:
        """True for a slice that has never had storage allocated."""
        return self._backing is None

    def append(self, *args: Any) -> Slice:
        """Return a slice with ``args`` added; reallocates when capacity runs out."""
        new_len = self._len + len(args)
        if not args:
            return self._view(self._backing, self._offset, self._len, self._cap)
        if new_len <= self._cap and self._backing is not None:
            start = self._offset + self._len
            self._backing[start : start + len(args)] = args
            return self._view(self._backing, self._offset, new_len, self._cap)
        new_cap = _grow(self._cap, new_len)
        backing = list(self) + list(args) + [0] * (new_cap - new_len)
        return self._view(backing, 0, new_len, new_cap)

    def copy_from(self, other: Iterable[Any]) -> int:
        """Copy items from ``other`` into this slice; returns how many were copied."""
        source = list(other)
        count = min(self._len, len(source))
        if count and self._backing is not None:
            self._backing[self._offset : self._offset + count] = source[:count]
        return count

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        if self._backing is None:
            return iter(())
        return iter(self._backing[self._offset : self._offset + self._len])

    def _check_index(self, index: int) -> int:
        if not 0 <= index < self._len:
            raise IndexError(f"index {index} out of range [0:{self._len}]")
        return self._offset + index

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            if index.step is not None:
                raise ValueError("slice steps are not supported")
            low = 0 if index.start is None else index.start
            high = self._len if index.stop is None else index.stop
            if not 0 <= low <= high <= self._cap:
                raise IndexError(f"slice bounds [{low}:{high}] out of range with capacity {self._cap}")
            return self._view(self._backing, self._offset + low, high - low, self._cap - low)
        position = self._check_index(index)
        assert self._backing is not None
        return self._backing[position]

    def __setitem__(self, index: int, value: Any) -> None:
        position = self._check_index(index)
        assert self._backing is not None
        self._backing[position] = value

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"Slice({list(self)!r}, cap={self._cap})"


def format_slice(values: Slice | Iterable[Any]) -> str:
    """Describe a slice as 'len=N cap=M slice=[...]'."""
    if not isinstance(values, Slice):
        values = Slice(values)
    return f"len={len(values)} cap={values.cap} slice={values}"