from dataclasses import dataclass, field
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class WindowSpec:
    title: str = "Flappy Box"
    width: int = 400
    height: int = 600
    target_fps: int = 60


@dataclass
class PhysicsSpec:
    gravity: float = 0.5       # px / tick^2
    flap_speed: float = -8.0   # px / tick, negative is up


@dataclass
class BirdSpec:
    x: float = 50
    width: int = 30
    height: int = 30


@dataclass
class PipeSpec:
    speed: float = 2.0
    spawn_interval_ms: float = 1500
    gap: int = 150
    width: int = 50
    # keep the gap this far from the top and the ground
    margin: int = 50


@dataclass
class ColorSpec:
    background: Color = (112, 197, 206)
    bird: Color = (244, 208, 63)
    pipe: Color = (46, 204, 113)
    text: Color = (255, 255, 255)
    hud: Color = (20, 20, 24)


@dataclass
class ControlSpec:
    flap_key: str = "space"


@dataclass
class GameConfig:
    window: WindowSpec = field(default_factory=WindowSpec)
    physics: PhysicsSpec = field(default_factory=PhysicsSpec)
    bird: BirdSpec = field(default_factory=BirdSpec)
    pipes: PipeSpec = field(default_factory=PipeSpec)
    colors: ColorSpec = field(default_factory=ColorSpec)
    controls: ControlSpec = field(default_factory=ControlSpec)
