"""Platform environment: platform type, well-known directories and path translation.

PlatformEnvironment owns the lazily computed, thread-safe values that describe where
OpenRA lives on this machine:
- current_platform: operating system family, detected once
- game_dir: installation directory holding the game's own files
- support_dir: per-user directory for settings, maps, replays and logs (created on first use)
- system_support_dir: machine-wide directory for mod metadata (never created or checked)

A `Support` directory inside the game directory overrides both support directories,
which allows portable installs that keep everything in one place.

All directory values end with a path separator so that symbolic prefixes can be
replaced by plain concatenation (see paths.py).

get_platform() returns the process-wide instance built from get_config(). Tests
construct their own PlatformEnvironment with injected collaborators instead.
"""

import os
import platform
import sys
import threading
import uuid
from pathlib import Path

import platformdirs
from loguru import logger

from . import paths
from .config import get_config
from .detection import OsProber, PlatformType, UnameProber, detect_platform
from .lazy import Lazy

APP_FOLDER = "OpenRA"
LOCAL_SUPPORT_FOLDER = "Support"
OSX_SYSTEM_SUPPORT_DIR = "/Library/Application Support/OpenRA/"
UNIX_SYSTEM_SUPPORT_DIR = "/var/games/openra/"

# Identifies this process in logs and bug reports
SESSION_ID = uuid.uuid4()


class SupportDirError(OSError):
    """The user support directory does not exist and could not be created."""


def with_separator(path: str | Path) -> str:
    """Return `path` as a string ending with exactly the platform separator."""
    text = str(path)
    return text if text.endswith(os.sep) else text + os.sep


def runtime_version() -> str:
    """Human-readable description of the Python runtime, for diagnostics."""
    implementation = platform.python_implementation()
    version = platform.python_version()
    if implementation == "PyPy":
        pypy = ".".join(str(part) for part in sys.pypy_version_info[:3])  # type: ignore[attr-defined]
        return f"PyPy {pypy} (Python {version})"
    return f"{implementation} {version}"


def discover_game_dir() -> Path:
    """Directory of the running program: the frozen executable, else the __main__ script, else cwd."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


class PlatformEnvironment:
    """Lazily computed platform facts and directories for one process (or one test)."""

    def __init__(
        self,
        prober: OsProber | None = None,
        game_dir: str | Path | None = None,
        personal_dir: str | Path | None = None,
        common_data_dir: str | Path | None = None,
    ):
        """All arguments are optional overrides; by default the real host is inspected.

        Args:
            prober: OS prober used for platform detection (defaults to UnameProber)
            game_dir: installation directory instead of discover_game_dir()
            personal_dir: the user's personal folder (documents on Windows, home elsewhere)
            common_data_dir: machine-wide application data folder used on Windows
        """
        self._prober = prober or UnameProber()
        self._game_dir_override = Path(game_dir) if game_dir is not None else None
        self._personal_dir_override = Path(personal_dir) if personal_dir is not None else None
        self._common_data_dir_override = Path(common_data_dir) if common_data_dir is not None else None

        self._platform = Lazy(lambda: detect_platform(self._prober))
        self._game_dir = Lazy(self._compute_game_dir)
        self._support_dir = Lazy(self._compute_support_dir)
        self._system_support_dir = Lazy(self._compute_system_support_dir)

    @property
    def current_platform(self) -> PlatformType:
        return self._platform.value

    @property
    def session_id(self) -> uuid.UUID:
        return SESSION_ID

    @property
    def runtime_version(self) -> str:
        return runtime_version()

    @property
    def game_dir(self) -> str:
        """Directory containing the game's own files, ending with a separator."""
        return self._game_dir.value

    @property
    def support_dir(self) -> str:
        """Directory containing user-specific support files (settings, maps, replays, logs).

        The directory is created if it does not exist when this is first queried.

        Raises:
            SupportDirError: If the directory cannot be created
        """
        return self._support_dir.value

    @property
    def system_support_dir(self) -> str:
        """Directory containing system-wide support files (mod metadata).

        This directory is not guaranteed to exist or be writable. Callers must check it
        themselves and fall back to support_dir if necessary.
        """
        return self._system_support_dir.value

    def resolve_path(self, *parts: str) -> str:
        """Join `parts` and replace a leading ^ or ./ with the support or game directory."""
        if len(parts) == 1:
            return paths.resolve_path(parts[0], support_dir=self.support_dir, game_dir=self.game_dir)
        return paths.resolve_segments(parts, support_dir=self.support_dir, game_dir=self.game_dir)

    def unresolve_path(self, path: str) -> str:
        """Replace a leading support or game directory in `path` with ^ or ./."""
        return paths.unresolve_path(path, support_dir=self.support_dir, game_dir=self.game_dir)

    def _compute_game_dir(self) -> str:
        game_dir = self._game_dir_override or discover_game_dir()
        return with_separator(game_dir.resolve())

    def _local_support_dir(self) -> str | None:
        """The portable `Support` folder inside the game directory, if present."""
        local = Path(self.game_dir) / LOCAL_SUPPORT_FOLDER
        if local.is_dir():
            logger.debug(f"Using local support directory {local}")
            return with_separator(local)
        return None

    def _personal_dir(self) -> Path:
        if self._personal_dir_override is not None:
            return self._personal_dir_override
        if self.current_platform == PlatformType.WINDOWS:
            return platformdirs.user_documents_path()
        return Path.home()

    def _compute_support_dir(self) -> str:
        local = self._local_support_dir()
        if local is not None:
            return local

        personal = self._personal_dir()
        if self.current_platform == PlatformType.WINDOWS:
            support = personal / APP_FOLDER
        elif self.current_platform == PlatformType.OSX:
            support = personal / "Library" / "Application Support" / APP_FOLDER
        else:
            support = personal / ".openra"

        if not support.is_dir():
            try:
                support.mkdir(parents=True, exist_ok=True)  # another process may create it first
            except OSError as e:
                logger.error(f"Cannot create support directory {support}: {e}")
                raise SupportDirError(e.errno, f"Cannot create support directory ({e.strerror or e})", str(support)) from e
            logger.info(f"Created support directory {support}")

        return with_separator(support)

    def _compute_system_support_dir(self) -> str:
        local = self._local_support_dir()
        if local is not None:
            return local

        if self.current_platform == PlatformType.WINDOWS:
            common = self._common_data_dir_override or platformdirs.site_data_path()
            return with_separator(common / APP_FOLDER)
        if self.current_platform == PlatformType.OSX:
            return OSX_SYSTEM_SUPPORT_DIR
        return UNIX_SYSTEM_SUPPORT_DIR


PLATFORM: PlatformEnvironment | None = None
_platform_lock = threading.Lock()


def get_platform() -> PlatformEnvironment:
    """Returns the process-wide PlatformEnvironment, creating it from get_config() on first use."""
    global PLATFORM
    with _platform_lock:
        if PLATFORM is None:
            PLATFORM = PlatformEnvironment(game_dir=get_config().game_dir)
    return PLATFORM
