class FlappyError(Exception):
    """Base class for errors raised by the game."""


class ConfigError(FlappyError):
    """configs/game.yaml holds a value the game cannot run with."""
