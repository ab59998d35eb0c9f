import sys

import pytest
from loguru import logger

import openra_platform.config
import openra_platform.environment
from openra_platform.environment import PlatformEnvironment


class FakeProber:
    """OsProber returning canned answers and counting kernel name queries."""

    def __init__(self, kernel: str | None = "Linux\n", windows: bool = False):
        self.kernel = kernel
        self.windows = windows
        self.calls = 0

    def is_windows_nt(self) -> bool:
        return self.windows

    def kernel_name(self) -> str:
        self.calls += 1
        if self.kernel is None:
            raise FileNotFoundError(2, "No such file or directory", "uname")
        return self.kernel


@pytest.fixture
def fake_prober():
    return FakeProber


@pytest.fixture
def game_dir(tmp_path):
    path = tmp_path / "game"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_env(game_dir, home_dir):
    """Build a PlatformEnvironment rooted in tmp_path, for the given kernel name."""

    def make(kernel: str | None = "Linux\n", windows: bool = False, **kwargs) -> PlatformEnvironment:
        kwargs.setdefault("game_dir", game_dir)
        kwargs.setdefault("personal_dir", home_dir)
        return PlatformEnvironment(prober=FakeProber(kernel, windows), **kwargs)

    return make


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset module-level CONFIG and PLATFORM around each test."""
    openra_platform.config.CONFIG = None
    openra_platform.environment.PLATFORM = None
    yield
    openra_platform.config.CONFIG = None
    openra_platform.environment.PLATFORM = None


@pytest.fixture(autouse=True)
def disable_file_logging(monkeypatch):
    """Prevent logger.add() from creating file handlers during tests."""
    original_add = logger.add

    def mock_add(sink, **kwargs):
        # Only allow non-file sinks (like sys.stderr which is the default)
        # Block file path sinks to prevent log files during tests
        if hasattr(sink, "__fspath__") or isinstance(sink, (str, bytes)):
            return None  # Return dummy handler ID
        return original_add(sink, **kwargs)

    monkeypatch.setattr(logger, "add", mock_add)
    yield
    logger.remove()
    original_add(sys.stderr)
