"""
Step-driven animation loop around a GrowthEngine.

The driver seeds the engine, advances it one step at a time, hands each frame
to a callback and waits ``animation_delay`` between frames. Cancellation is
cooperative: ``stop()`` is honoured between steps.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, Optional

from bonsai.core.engine.growth_engine import GrowthEngine

logger = logging.getLogger(__name__)

FrameCallback = Callable[[GrowthEngine], None]


class GrowthDriver:
    """Paces a GrowthEngine from seed to its last step."""

    def __init__(
        self,
        engine: GrowthEngine,
        *,
        delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_steps: Optional[int] = None,
    ):
        self.engine = engine
        self.delay = engine.config.delay_seconds if delay is None else delay
        self.sleep = sleep
        self.max_steps = max_steps
        self.is_growing = False
        self._used = False

    def frames(self) -> Iterator[GrowthEngine]:
        """Seed and yield the engine after every step until done or stopped."""
        if self._used:
            self.engine.reset()
        self._used = True
        self.engine.seed()
        self.is_growing = True

        steps = 0
        while self.is_growing:
            has_more = self.engine.advance_step()
            steps += 1
            yield self.engine
            if not has_more:
                break
            if self.max_steps is not None and steps >= self.max_steps:
                logger.warning("Stopped after max_steps=%d with %d agents alive", steps, self.engine.live_count)
                break
        self.is_growing = False

    def start(self, on_frame: Optional[FrameCallback] = None) -> int:
        """Run the animation; returns the number of frames produced."""
        count = 0
        for engine in self.frames():
            count += 1
            if on_frame is not None:
                on_frame(engine)
            if self.is_growing and not engine.is_finished and self.delay > 0:
                self.sleep(self.delay)
        return count

    def stop(self) -> None:
        self.is_growing = False


__all__ = ["FrameCallback", "GrowthDriver"]
