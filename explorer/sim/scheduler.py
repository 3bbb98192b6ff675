"""
Tick schedulers.

A tick ends by calling `scheduler.request_tick(callback)` to ask for the next
one. The scheduler decides when (and whether) that callback runs:

- ClockScheduler: realtime, paced by pygame's clock at a target FPS.
- ManualScheduler: holds the pending tick until `step()` is called.

Only one tick can be pending at a time; a newer request replaces the older one.
"""
from __future__ import annotations

from typing import Callable, Optional, Protocol

import pygame

TickCallback = Callable[[], None]


class Scheduler(Protocol):
    def request_tick(self, callback: TickCallback) -> None:
        """Ask for `callback` to run as the next frame."""


class ClockScheduler:
    """Realtime trampoline driven by pygame.time.Clock."""

    def __init__(self, fps: int = 60, clock: Optional[pygame.time.Clock] = None):
        self.fps = max(1, int(fps))
        self.clock = clock or pygame.time.Clock()
        self._pending: Optional[TickCallback] = None
        self.frames = 0

    def request_tick(self, callback: TickCallback) -> None:
        self._pending = callback

    def run(self):
        """Run ticks until a tick stops requesting the next one."""
        while self._pending is not None:
            callback, self._pending = self._pending, None
            self.clock.tick(self.fps)
            callback()
            self.frames += 1


class ManualScheduler:
    """Deterministic scheduler: ticks only run when stepped."""

    def __init__(self):
        self._pending: Optional[TickCallback] = None
        self.frames = 0

    def request_tick(self, callback: TickCallback) -> None:
        self._pending = callback

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def step(self, count: int = 1) -> int:
        """Run up to `count` pending ticks. Returns how many ran."""
        ran = 0
        for _ in range(max(0, int(count))):
            if self._pending is None:
                break
            callback, self._pending = self._pending, None
            callback()
            self.frames += 1
            ran += 1
        return ran
