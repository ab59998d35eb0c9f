"""Platform identification and directory resolution for OpenRA.

Provides get_platform(), the process-wide PlatformEnvironment. Use its game_dir,
support_dir and system_support_dir for well-known locations, and resolve_path() /
unresolve_path() to translate `^` and `./` prefixed paths from configuration files.
"""

from .detection import PlatformType
from .environment import PlatformEnvironment, SupportDirError, get_platform

__all__ = ["PlatformEnvironment", "PlatformType", "SupportDirError", "get_platform"]
