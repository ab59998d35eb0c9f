"""Configuration management for openra-platform.

Provides Config dataclass and load_config() function to parse CLI arguments,
environment variables, and defaults.

The installation directory is normally discovered from the running program.
It can be overridden with --game-dir CLI flag or OPENRA_GAME_DIR environment variable.
Debug logging is enabled with --debug or OPENRA_DEBUG=1.
Precedence: CLI flag > env var > default
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Startup options for the platform environment."""

    game_dir: Path | None = None  # None: discover from the running program
    debug: bool = False


def load_config(args: list[str] | None = None) -> Config:
    """Load configuration from CLI args, environment, or defaults.

    Precedence: CLI flag > env var > default

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Config instance with an absolute game_dir, if one was given
    """
    if args is None:
        args = sys.argv[1:]

    # Check CLI argument: --game-dir /path/to/openra
    game_dir: Path | None = None
    for i, arg in enumerate(args):
        if arg == "--game-dir" and i + 1 < len(args):
            game_dir = Path(args[i + 1])
            break

    # Check environment variable: OPENRA_GAME_DIR
    if game_dir is None:
        env_game_dir = os.environ.get("OPENRA_GAME_DIR")
        if env_game_dir:
            game_dir = Path(env_game_dir)

    if game_dir is not None:
        game_dir = game_dir.resolve()

    debug = "--debug" in args or os.environ.get("OPENRA_DEBUG", "0") == "1"

    return Config(game_dir=game_dir, debug=debug)


CONFIG: Config | None = None


def get_config() -> Config:
    """Returns the global CONFIG instance, loading it from sys.argv and the environment on first use."""
    global CONFIG
    if CONFIG is None:
        CONFIG = load_config()
    return CONFIG
