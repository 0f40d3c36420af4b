"""
Command line entry point.

    flappy-box [--config PATH] [--debug]

Without --config the game reads configs/game.yaml under the working directory
and falls back to built-in defaults when it is missing.
"""

import argparse
import logging
import os
import sys

from flappy.data.loader import Loader
from flappy.engine.app import GameApp
from flappy.errors import ConfigError

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="flappy-box", description="Flap between the pipes.")
    parser.add_argument("--config", help="path to a game.yaml (default: ./configs/game.yaml)")
    parser.add_argument("--debug", action="store_true", help="log spawns and scoring")
    return parser.parse_args(argv)


def main(argv=None, base_dir=None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    loader = Loader(base_dir or os.getcwd(), config_path=args.config)
    try:
        config = loader.load_game_config()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"flappy-box: {e}", file=sys.stderr)
        return 2

    GameApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
