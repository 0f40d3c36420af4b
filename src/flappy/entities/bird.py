from dataclasses import dataclass

from flappy.data.schema import BirdSpec


@dataclass
class Bird:
    x: float
    y: float
    width: int = 30
    height: int = 30
    # px per tick, positive is down
    velocity: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def rect(self):
        return (int(self.x), int(self.y), self.width, self.height)


def spawn_bird(spec: BirdSpec, screen_height: int) -> Bird:
    return Bird(x=spec.x, y=screen_height / 2, width=spec.width, height=spec.height)


def reset_bird(bird: Bird, screen_height: int):
    """Back to mid-screen at rest; x never changes during a session."""
    bird.y = screen_height / 2
    bird.velocity = 0.0
