"""A closable FIFO channel shared between threads, plus two producers built on it."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from typing import Any


class ChannelClosed(Exception):
    """Raised on sending to, closing, or draining a closed channel."""


class Channel:
    """A FIFO channel between threads.

    With ``capacity`` 0 a send waits until a receiver has taken the value.
    Otherwise up to ``capacity`` values are buffered before senders wait.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._closed = False
        self._cond = threading.Condition()
        self._sent = 0
        self._received = 0

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, value: Any) -> None:
        """Put a value on the channel, waiting while it is full."""
        with self._cond:
            limit = max(self.capacity, 1)
            while not self._closed and len(self._items) >= limit:
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(value)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self.capacity == 0:
                while self._received < ticket and not self._closed:
                    self._cond.wait()

    def receive(self) -> Any:
        """Take the oldest value, waiting for one; raises once closed and drained."""
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if not self._items:
                raise ChannelClosed("receive from closed channel")
            value = self._items.popleft()
            self._received += 1
            self._cond.notify_all()
            return value

    def close(self) -> None:
        """Close the channel; values already buffered can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return

    def __len__(self) -> int:
        with self._cond:
            return min(len(self._items), self.capacity)


def fibonacci_stream(count: int) -> Iterator[int]:
    """Yield ``count`` terms, advancing with x = y, then y = x + y."""
    x, y = 1, 1
    for _ in range(count):
        yield x
        x = y
        y = x + y


def produce(count: int) -> Channel:
    """Return an unbuffered channel fed 0..count-1 by a thread, then closed."""
    channel = Channel()

    def _fill() -> None:
        for i in range(count):
            channel.send(i)
        channel.close()

    threading.Thread(target=_fill, daemon=True).start()
    return channel