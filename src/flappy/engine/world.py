import logging
import random
from typing import List, Optional

from flappy.data.schema import GameConfig
from flappy.engine.geometry import pipe_collides
from flappy.engine.physics import apply_gravity, clamp_to_bounds, flap
from flappy.entities.bird import Bird, reset_bird, spawn_bird
from flappy.entities.pipe import PipePair, PipeSpawner

logger = logging.getLogger(__name__)


class World:
    """
    Everything one game session needs: the bird, the live pipes (oldest
    first), the score and the game-over flag.

    Physics advances once per ``step`` (velocities are px/tick); only pipe
    spawning runs on elapsed milliseconds.
    """
    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.width = config.window.width
        self.height = config.window.height
        self.bird: Bird = spawn_bird(config.bird, self.height)
        self.pipes: List[PipePair] = []
        self.spawner = PipeSpawner(config.pipes, self.width, self.height, rng=rng)
        self.score = 0
        self.game_over = False

    def press(self):
        """The one game key: flap, or start over once the game has ended."""
        if self.game_over:
            self.reset()
        else:
            flap(self.bird, self.config.physics.flap_speed)

    def reset(self):
        reset_bird(self.bird, self.height)
        self.pipes = []
        self.spawner.reset()
        self.score = 0
        self.game_over = False
        logger.info("Game restarted")

    def step(self, dt_ms: float):
        if self.game_over:
            return

        apply_gravity(self.bird, self.config.physics.gravity)
        if clamp_to_bounds(self.bird, self.height):
            self._end("hit the ground")

        new_pipe = self.spawner.try_spawn(dt_ms)
        if new_pipe:
            self.pipes.append(new_pipe)

        speed = self.config.pipes.speed
        survivors = []
        for p in self.pipes:
            p.x -= speed

            if pipe_collides(p, self.bird):
                self._end("hit a pipe")

            if not p.passed and p.right < self.bird.x:
                p.passed = True
                self.score += 1
                logger.debug("score %d", self.score)

            if p.right >= 0:
                survivors.append(p)
        self.pipes = survivors

    def _end(self, reason):
        if not self.game_over:
            logger.info("Game over (%s), score %d", reason, self.score)
        self.game_over = True
