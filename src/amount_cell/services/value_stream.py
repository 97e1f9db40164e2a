"""Conflating value streams for amount observers."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

T = TypeVar("T")


class LatestValueStream(Generic[T]):
    """Holds the newest value and wakes async subscribers without blocking.

    ``publish`` never awaits. A value is dropped only when it both compares
    and renders equal to the current one, so ``Decimal("1.50")`` still
    replaces ``Decimal("1.5")``. A subscriber that falls behind only sees the
    value current when it resumes.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._wakeups: set[asyncio.Event] = set()

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._wakeups)

    def publish(self, value: T) -> None:
        if value == self._value and str(value) == str(self._value):
            return
        self._value = value
        self._version += 1
        for wakeup in self._wakeups:
            wakeup.set()

    async def subscribe(self) -> AsyncIterator[T]:
        """Yield the current value, then each newer value as it is published."""

        wakeup = asyncio.Event()
        self._wakeups.add(wakeup)
        seen_version = -1
        try:
            while True:
                if seen_version != self._version:
                    seen_version = self._version
                    yield self._value
                    continue
                await wakeup.wait()
                wakeup.clear()
        finally:
            self._wakeups.discard(wakeup)
