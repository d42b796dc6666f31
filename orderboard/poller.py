"""Cancellable fixed-period poll schedule."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from orderboard.config import POLL_INTERVAL_SECONDS
from orderboard.debug_log import log_debug


class Poller:
    """Run ``on_tick`` once immediately, then every ``interval`` seconds.

    Ticks never overlap, whether scheduled or requested through ``tick_now``:
    a tick that comes due while another is in flight is skipped. ``stop``
    cancels the loop; once it returns no further tick starts, and calling it
    again does nothing.
    """

    def __init__(
        self,
        on_tick: Callable[[], Awaitable[None]],
        interval: float = POLL_INTERVAL_SECONDS,
        name: str = "orders",
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.on_tick = on_tick
        self.interval = interval
        self.name = name
        self.tick_count = 0
        self._task: asyncio.Task[None] | None = None
        self._stopped = False
        self._ticking = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def ticking(self) -> bool:
        return self._ticking

    def start(self) -> None:
        if self._stopped:
            raise RuntimeError(f"poller {self.name!r} was stopped and cannot restart")
        if self.running:
            return
        log_debug(f"poller_start name={self.name} interval={self.interval}")
        self._task = asyncio.get_running_loop().create_task(self._run(), name=f"poller-{self.name}")

    async def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        log_debug(f"poller_stop name={self.name} ticks={self.tick_count}")

    async def tick_now(self) -> bool:
        """Run one tick out of schedule; False when stopped or a tick is in flight."""
        if self._stopped or self._ticking:
            log_debug(f"poller_tick_skipped name={self.name} stopped={self._stopped}")
            return False
        await self._tick()
        return True

    async def _run(self) -> None:
        while True:
            if not self._ticking:
                await self._tick()
            await asyncio.sleep(self.interval)

    async def _tick(self) -> None:
        self._ticking = True
        self.tick_count += 1
        try:
            await self.on_tick()
        except Exception as exc:
            # A failed tick must not end the schedule.
            log_debug(f"poller_tick_failed name={self.name} error={exc!r}")
        finally:
            self._ticking = False
