"""Command line entry point for openra-platform.

Prints the detected platform and directories, or translates paths between their
symbolic and absolute forms:

    openra-platform [--game-dir PATH] [--debug] [info]
    openra-platform resolve SEGMENT [SEGMENT ...]
    openra-platform unresolve PATH [PATH ...]

Logs go to stderr and to Logs/platform.log inside the user support directory.
"""

import sys
from pathlib import Path

from loguru import logger

from . import config
from .config import Config, load_config
from .environment import PlatformEnvironment, SupportDirError, get_platform

USAGE = "usage: openra-platform [--game-dir PATH] [--debug] [info | resolve SEGMENT... | unresolve PATH...]"


def positional_args(args: list[str]) -> list[str]:
    """Strip the options understood by load_config() from `args`."""
    positional = []
    skip = False
    for i, arg in enumerate(args):
        if skip:
            skip = False
        elif arg == "--game-dir":
            skip = i + 1 < len(args)
        elif arg != "--debug":
            positional.append(arg)
    return positional


def setup_logging(cfg: Config, env: PlatformEnvironment) -> Path:
    """Send logs to stderr and a rotating file in the support directory. Returns the log file path."""
    log_file = Path(env.support_dir) / "Logs" / "platform.log"
    log_fmt = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if cfg.debug else "INFO", format=log_fmt)
    logger.add(log_file, rotation="10 MB", retention="7 days", level="DEBUG", format=log_fmt)
    return log_file


def describe(env: PlatformEnvironment) -> list[str]:
    """Diagnostic lines for the info command."""
    system_dir = env.system_support_dir
    exists = "exists" if Path(system_dir).is_dir() else "missing"
    return [
        f"Platform: {env.current_platform.name}",
        f"Session: {env.session_id}",
        f"Runtime: {env.runtime_version}",
        f"Game directory: {env.game_dir}",
        f"Support directory: {env.support_dir}",
        f"System support directory: {system_dir} ({exists})",
    ]


def run(command: str, operands: list[str], env: PlatformEnvironment) -> int:
    """Execute one command, writing results to stdout. Returns the process exit status."""
    if command == "info" and not operands:
        lines = describe(env)
    elif command == "resolve" and operands:
        lines = [env.resolve_path(*operands)]
    elif command == "unresolve" and operands:
        lines = [env.unresolve_path(path) for path in operands]
    else:
        print(USAGE, file=sys.stderr)
        return 2
    for line in lines:
        print(line)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for openra-platform."""
    if args is None:
        args = sys.argv[1:]
    cfg = config.CONFIG = load_config(args)
    env = get_platform()
    try:
        log_file = setup_logging(cfg, env)
    except SupportDirError as e:
        logger.critical(f"No usable support directory: {e}")
        return 1
    logger.debug(f"Session {env.session_id} on {env.runtime_version}")
    logger.debug(f"Logging to file: {log_file}")

    positional = positional_args(args) or ["info"]
    return run(positional[0], positional[1:], env)


if __name__ == "__main__":
    sys.exit(main())
