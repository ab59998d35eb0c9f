"""Tests for symbolic path translation."""

import os

import pytest

from openra_platform.paths import resolve_path, resolve_segments, unresolve_path

SUPPORT = os.path.join(os.sep, "home", "user", ".openra") + os.sep
GAME = os.path.join(os.sep, "opt", "openra") + os.sep
DIRS = {"support_dir": SUPPORT, "game_dir": GAME}


class TestResolvePath:
    def test_caret_alone_is_support_dir(self):
        assert resolve_path("^", **DIRS) == SUPPORT

    def test_caret_prefix_is_substituted(self):
        assert resolve_path("^maps", **DIRS) == SUPPORT + "maps"

    def test_caret_slash_keeps_separator(self):
        # Substitution, not joining: the separator after ^ is preserved
        assert resolve_path("^/maps", **DIRS) == SUPPORT + "/maps"

    def test_dot_is_game_dir(self):
        assert resolve_path(".", **DIRS) == GAME

    def test_dot_slash_prefix(self):
        assert resolve_path("./settings.yml", **DIRS) == GAME + "settings.yml"

    def test_dot_backslash_prefix(self):
        assert resolve_path(".\\mods\\ra", **DIRS) == GAME + "mods\\ra"

    def test_trailing_whitespace_trimmed(self):
        assert resolve_path("^/replays \t ", **DIRS) == resolve_path("^/replays", **DIRS)

    def test_leading_whitespace_is_significant(self):
        # Only trailing blanks are trimmed; leading ones are part of the path
        assert resolve_path("  ^/replays  ", **DIRS) == "  ^/replays"

    def test_dot_with_trailing_whitespace(self):
        assert resolve_path(".\t", **DIRS) == GAME

    def test_unprefixed_path_unchanged(self):
        assert resolve_path("/etc/foo", **DIRS) == "/etc/foo"
        assert resolve_path("relative/file.yaml", **DIRS) == "relative/file.yaml"

    def test_dotdot_and_hidden_files_unchanged(self):
        assert resolve_path("../up", **DIRS) == "../up"
        assert resolve_path(".hidden", **DIRS) == ".hidden"

    def test_only_first_caret_replaced(self):
        assert resolve_path("^a^b", **DIRS) == SUPPORT + "a^b"


class TestResolveSegments:
    def test_segments_are_joined(self):
        assert resolve_segments(["^", "maps", "ra"], **DIRS) == SUPPORT + os.sep + os.path.join("maps", "ra")

    def test_single_segment(self):
        assert resolve_segments(["."], **DIRS) == GAME

    def test_absolute_segment_discards_earlier(self):
        assert resolve_segments(["^", os.sep + "abs"], **DIRS) == os.sep + "abs"

    def test_no_segments_rejected(self):
        with pytest.raises(ValueError):
            resolve_segments([], **DIRS)


class TestUnresolvePath:
    def test_support_dir_becomes_caret(self):
        assert unresolve_path(SUPPORT, **DIRS) == "^"
        assert unresolve_path(SUPPORT + "maps/a.oramap", **DIRS) == "^maps/a.oramap"

    def test_game_dir_becomes_dot_slash(self):
        assert unresolve_path(GAME + "mods", **DIRS) == "./mods"
        assert unresolve_path(GAME, **DIRS) == "./"

    def test_unrelated_path_unchanged(self):
        assert unresolve_path("/etc/foo", **DIRS) == "/etc/foo"

    def test_prefix_match_is_case_sensitive(self):
        assert unresolve_path(SUPPORT.upper() + "x", **DIRS) == SUPPORT.upper() + "x"

    def test_support_dir_checked_before_game_dir(self):
        # Local Support folder inside the game directory
        support = GAME + "Support" + os.sep
        dirs = {"support_dir": support, "game_dir": GAME}
        assert unresolve_path(support + "settings.yaml", **dirs) == "^settings.yaml"
        assert unresolve_path(GAME + "mods", **dirs) == "./mods"

    def test_round_trip(self):
        for symbolic in ("^/maps", "^settings.yaml", "./mods/ra"):
            assert unresolve_path(resolve_path(symbolic, **DIRS), **DIRS) == symbolic
        assert resolve_path(unresolve_path(SUPPORT, **DIRS), **DIRS) == SUPPORT
