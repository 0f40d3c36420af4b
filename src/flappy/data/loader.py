import copy
import logging
import os
from typing import Any, Dict, Optional

import pygame
import yaml

from flappy.data.schema import (
    BirdSpec, ColorSpec, ControlSpec, GameConfig,
    PhysicsSpec, PipeSpec, WindowSpec,
)
from flappy.engine.input import resolve_key
from flappy.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "game": {"title": "Flappy Box", "resolution": [400, 600], "target_fps": 60},
    "physics": {"gravity": 0.5, "flap_speed": -8},
    "bird": {"x": 50, "width": 30, "height": 30},
    "pipes": {"speed": 2, "spawn_interval_ms": 1500, "gap": 150, "width": 50, "margin": 50},
    "colors": {
        "background": "#70c5ce",
        "bird": "#f4d03f",
        "pipe": "#2ecc71",
        "text": "#ffffff",
        "hud": "#141418",
    },
    "controls": {"flap_key": "space"},
}


def _read_yaml(path: str, default=None):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config %s not found, using defaults", path)
        return default
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read %s (%s), using defaults", path, e)
        return default


def merge_into(target: Dict[str, Any], src: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``src`` on ``target``; later keys win, nulls are skipped."""
    for k, v in (src or {}).items():
        if v is None:
            continue
        if isinstance(v, dict) and isinstance(target.get(k), dict):
            merge_into(target[k], v)
        else:
            target[k] = v
    return target


def _color(name, value):
    try:
        if isinstance(value, str):
            c = pygame.Color(value)
            return (c.r, c.g, c.b)
        r, g, b = (int(x) for x in value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"colors.{name}: {value!r} is not a colour") from e
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ConfigError(f"colors.{name}: channels must be 0..255, got {value!r}")
    return (r, g, b)


def _section(d, name):
    s = d.get(name)
    if not isinstance(s, dict):
        raise ConfigError(f"{name}: expected a mapping, got {s!r}")
    return s


def _number(section, key, value, positive=True):
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{section}.{key}: {value!r} is not a number") from e
    if positive and v <= 0:
        raise ConfigError(f"{section}.{key} must be positive, got {value!r}")
    return v


def _count(section, key, value, minimum=1):
    """Whole number of pixels / frames; truncated before the range check."""
    v = int(_number(section, key, value, positive=False))
    if v < minimum:
        raise ConfigError(f"{section}.{key} must be at least {minimum}, got {value!r}")
    return v


class Loader:
    """
    Reads the game configuration:
      - configs/game.yaml under ``base_dir`` (or an explicit path)
    Missing files and keys fall back to DEFAULTS; anything the game cannot
    run with raises ConfigError.
    """
    def __init__(self, base_dir: str, config_path: Optional[str] = None):
        self.base_dir = base_dir
        self.config_dir = os.path.join(base_dir, "configs")
        self.config_path = config_path or os.path.join(self.config_dir, "game.yaml")

    def load_raw(self) -> Optional[Dict[str, Any]]:
        """File contents as written, or None when it could not be read."""
        data = _read_yaml(self.config_path)
        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"{self.config_path}: top level must be a mapping")
        return data

    def load_game_config(self) -> GameConfig:
        data = self.load_raw()
        cfg = self.parse(data)
        if data is None:
            logger.info("Using built-in default config")
        else:
            logger.info("Loaded config from %s", self.config_path)
        return cfg

    @staticmethod
    def parse(d: Optional[Dict[str, Any]]) -> GameConfig:
        d = merge_into(copy.deepcopy(DEFAULTS), d or {})
        game = _section(d, "game")
        try:
            W, H = (int(v) for v in game.get("resolution", [400, 600]))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"game.resolution: {game.get('resolution')!r}") from e
        if W <= 0 or H <= 0:
            raise ConfigError(f"game.resolution must be positive, got {[W, H]}")
        window = WindowSpec(
            title=str(game.get("title", "Flappy Box")),
            width=W, height=H,
            target_fps=_count("game", "target_fps", game.get("target_fps")),
        )

        ph = _section(d, "physics")
        physics = PhysicsSpec(
            gravity=_number("physics", "gravity", ph.get("gravity")),
            flap_speed=_number("physics", "flap_speed", ph.get("flap_speed"), positive=False),
        )
        if physics.flap_speed >= 0:
            raise ConfigError("physics.flap_speed must be negative (upwards)")

        b = _section(d, "bird")
        bird = BirdSpec(
            x=_number("bird", "x", b.get("x"), positive=False),
            width=_count("bird", "width", b.get("width")),
            height=_count("bird", "height", b.get("height")),
        )
        if bird.height >= H:
            raise ConfigError(f"bird.height ({bird.height}) does not fit a {H}px screen")

        p = _section(d, "pipes")
        pipes = PipeSpec(
            speed=_number("pipes", "speed", p.get("speed")),
            spawn_interval_ms=_number("pipes", "spawn_interval_ms", p.get("spawn_interval_ms")),
            gap=_count("pipes", "gap", p.get("gap")),
            width=_count("pipes", "width", p.get("width")),
            margin=_count("pipes", "margin", p.get("margin"), minimum=0),
        )
        if pipes.gap + 2 * pipes.margin >= H:
            raise ConfigError(
                f"pipes.gap ({pipes.gap}) plus margins does not fit a {H}px screen")

        colors = ColorSpec(**{k: _color(k, v) for k, v in _section(d, "colors").items()
                              if k in ColorSpec.__dataclass_fields__})

        key_name = str(_section(d, "controls").get("flap_key", "space"))
        code = resolve_key(key_name)
        if code is None:
            raise ConfigError(f"controls.flap_key: unknown key {key_name!r}")
        if code == pygame.K_ESCAPE:
            raise ConfigError("controls.flap_key: escape is reserved for quitting")
        controls = ControlSpec(flap_key=key_name)

        return GameConfig(window=window, physics=physics, bird=bird,
                          pipes=pipes, colors=colors, controls=controls)
