import logging
import random
from dataclasses import dataclass
from typing import Optional

from flappy.data.schema import PipeSpec

logger = logging.getLogger(__name__)


@dataclass
class PipePair:
    x: float
    # bottom edge of the top barrier
    top_height: float
    width: int = 50
    gap: int = 150
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom_y(self) -> float:
        return self.top_height + self.gap


def spawn_pipe(spec: PipeSpec, screen_w: int, screen_h: int, rng=random) -> PipePair:
    """New pair at the right edge, gap at least ``margin`` px from top and ground."""
    span = screen_h - spec.gap - 2 * spec.margin
    top = rng.random() * span + spec.margin
    return PipePair(x=screen_w, top_height=top, width=spec.width, gap=spec.gap)


class PipeSpawner:
    def __init__(self, spec: PipeSpec, screen_w: int, screen_h: int, rng: Optional[random.Random] = None):
        self.spec = spec
        self.interval = float(spec.spawn_interval_ms)
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.rng = rng or random.Random()
        self.reset()

    def reset(self):
        # due on the first tick after a reset
        self.timer = self.interval

    def try_spawn(self, dt_ms: float) -> Optional[PipePair]:
        self.timer += dt_ms
        if self.timer >= self.interval:
            self.timer -= self.interval
            pipe = spawn_pipe(self.spec, self.screen_w, self.screen_h, self.rng)
            logger.debug("spawned pipe top=%.1f bottom=%.1f", pipe.top_height, pipe.bottom_y)
            return pipe
        return None
