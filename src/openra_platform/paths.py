"""Translation between symbolic and absolute paths.

Configuration files refer to paths with two reserved prefixes:
    ^      relative to the user support directory
    . ./ .\\  relative to the installation (game) directory

The directory arguments are expected to end with a path separator, so prefixes are
replaced by plain string substitution. These functions are pure; PlatformEnvironment
supplies its cached directories to them.
"""

import os
from typing import Iterable

SUPPORT_PREFIX = "^"
GAME_PREFIX = "./"


def resolve_path(path: str, *, support_dir: str, game_dir: str) -> str:
    """Replace a special prefix on `path` with the directory it stands for.

    Trailing spaces and tabs are dropped first; leading whitespace is significant.
    Paths without a recognised prefix are returned unchanged.
    """
    path = path.rstrip(" \t")

    if path.startswith(SUPPORT_PREFIX):
        path = support_dir + path[1:]

    if path == ".":
        return game_dir

    if path.startswith("./") or path.startswith(".\\"):
        path = game_dir + path[2:]

    return path


def resolve_segments(segments: Iterable[str], *, support_dir: str, game_dir: str) -> str:
    """Join `segments` with the platform separator, then resolve the result."""
    segments = list(segments)
    if not segments:
        raise ValueError("At least one path segment is required")
    return resolve_path(os.path.join(*segments), support_dir=support_dir, game_dir=game_dir)


def unresolve_path(path: str, *, support_dir: str, game_dir: str) -> str:
    """Replace a leading support or game directory with its symbolic prefix.

    The support directory is tested first. When the two directories overlap (a local
    Support folder inside the game directory), paths under it always become `^...`.
    """
    if path.startswith(support_dir):
        return SUPPORT_PREFIX + path[len(support_dir) :]
    if path.startswith(game_dir):
        return GAME_PREFIX + path[len(game_dir) :]
    return path
