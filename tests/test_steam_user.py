from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

from gaming_mode.config import EditorConfig
from gaming_mode.utils.steam_user import is_steam_running, locate_document


def test_locate_document_in_first_candidate(config: EditorConfig, shortcuts_path: Path) -> None:
    assert locate_document(config) == shortcuts_path


def test_locate_document_does_not_require_file(config: EditorConfig, shortcuts_path: Path) -> None:
    assert not shortcuts_path.exists()
    assert locate_document(config) is not None


def test_first_candidate_wins(tmp_path: Path) -> None:
    (tmp_path / ".steam" / "steam" / "userdata" / "111").mkdir(parents=True)
    (tmp_path / ".local" / "share" / "Steam" / "userdata" / "222").mkdir(parents=True)

    path = locate_document(EditorConfig(home=tmp_path))

    assert path == tmp_path / ".steam" / "steam" / "userdata" / "111" / "config" / "shortcuts.vdf"


def test_candidate_without_account_dirs_is_skipped(tmp_path: Path) -> None:
    first = tmp_path / ".steam" / "steam" / "userdata"
    (first / "anonymous").mkdir(parents=True)
    (first / "999").write_text("not a directory")
    (tmp_path / ".local" / "share" / "Steam" / "userdata" / "222").mkdir(parents=True)

    path = locate_document(EditorConfig(home=tmp_path))

    assert path == tmp_path / ".local" / "share" / "Steam" / "userdata" / "222" / "config" / "shortcuts.vdf"


def test_flatpak_candidate(tmp_path: Path) -> None:
    root = tmp_path / ".var" / "app" / "com.valvesoftware.Steam" / "data" / "Steam" / "userdata"
    (root / "42").mkdir(parents=True)
    assert locate_document(EditorConfig(home=tmp_path)) == root / "42" / "config" / "shortcuts.vdf"


def test_locate_document_not_found(tmp_path: Path) -> None:
    assert locate_document(EditorConfig(home=tmp_path)) is None


def test_is_steam_running_true() -> None:
    with patch("gaming_mode.utils.steam_user.subprocess.run", return_value=Mock(returncode=0)) as run:
        assert is_steam_running() is True
    assert run.call_args[0][0] == ["pgrep", "-x", "steam"]


def test_is_steam_running_false() -> None:
    with patch("gaming_mode.utils.steam_user.subprocess.run", return_value=Mock(returncode=1)):
        assert is_steam_running() is False


def test_is_steam_running_without_pgrep() -> None:
    with patch("gaming_mode.utils.steam_user.subprocess.run", side_effect=FileNotFoundError("pgrep")):
        assert is_steam_running() is False


def test_non_ascii_digit_directories_are_skipped(tmp_path: Path) -> None:
    root = tmp_path / ".steam" / "steam" / "userdata"
    (root / "²").mkdir(parents=True)
    (root / "٣").mkdir()

    assert locate_document(EditorConfig(home=tmp_path)) is None
