from __future__ import annotations

import struct
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from gaming_mode.config import EditorConfig  # noqa: E402

ACCOUNT_ID = "12345678"


def _key(name: str) -> bytes:
    return name.encode("utf-8") + b"\x00"


def vdf_string(key: str, value: str) -> bytes:
    return b"\x01" + _key(key) + value.encode("utf-8") + b"\x00"


def vdf_int32(key: str, value: int) -> bytes:
    return b"\x02" + _key(key) + struct.pack("<i", value)


def vdf_map(key: str, *fields: bytes) -> bytes:
    return b"\x00" + _key(key) + b"".join(fields) + b"\x08"


def vdf_document(*entries: bytes) -> bytes:
    return vdf_map("shortcuts", *entries) + b"\x08"


@pytest.fixture
def existing_game_entry() -> bytes:
    """Binary entry "0" as Steam writes it, plus a few foreign field types."""
    return vdf_map(
        "0",
        vdf_int32("appid", -1234567890),
        vdf_string("AppName", "Existing Game"),
        vdf_string("Exe", "/opt/g"),
        vdf_string("StartDir", "/opt"),
        vdf_string("icon", ""),
        vdf_string("LaunchOptions", "-windowed"),
        vdf_int32("IsHidden", 0),
        vdf_int32("AllowOverlay", 1),
        b"\x03" + _key("Volume") + struct.pack("<f", 0.5),
        b"\x07" + _key("LastPlayTime64") + struct.pack("<Q", 2 ** 40 + 7),
        vdf_map("tags", vdf_string("0", "Favorite")),
    )


@pytest.fixture
def existing_document_bytes(existing_game_entry) -> bytes:
    return vdf_document(existing_game_entry)


@pytest.fixture
def steam_home(tmp_path: Path) -> Path:
    """A home directory with one Steam account under ~/.steam/steam/userdata."""
    (tmp_path / ".steam" / "steam" / "userdata" / ACCOUNT_ID / "config").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def shortcuts_path(steam_home: Path) -> Path:
    return steam_home / ".steam" / "steam" / "userdata" / ACCOUNT_ID / "config" / "shortcuts.vdf"


@pytest.fixture
def config(steam_home: Path) -> EditorConfig:
    return EditorConfig(home=steam_home)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own Steam overrides out of the tests."""
    monkeypatch.delenv("STEAM_ROOT", raising=False)
    monkeypatch.delenv("RETURN_TO_DESKTOP_SCRIPT", raising=False)
