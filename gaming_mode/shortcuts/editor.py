"""Steam shortcuts editor for the gaming mode toggle.

Registers the "Return to Desktop" non-Steam shortcut in shortcuts.vdf so it
can be launched from Big Picture to leave the gamescope session.
"""

import os
import struct
import logging
import binascii
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from ..config import EditorConfig
from ..errors import NotFoundError, DecodeError, DuplicateEntry, WriteError
from ..utils.steam_user import locate_document
from .vdf import load_shortcuts_vdf, save_shortcuts_vdf

logger = logging.getLogger(__name__)


# EditResult statuses
ADDED = "added"
ALREADY_PRESENT = "already_present"
REMOVED = "removed"
ABSENT = "absent"
NOT_FOUND = "not_found"
DECODE_ERROR = "decode_error"
WRITE_ERROR = "write_error"

_OK_STATUSES = (ADDED, ALREADY_PRESENT, REMOVED, ABSENT)


@dataclass
class ShortcutEntry:
    """Represents a non-Steam shortcut entry"""
    app_name: str
    exe: str
    start_dir: str
    icon: str = ""
    app_id: int = 0  # unsigned 32-bit
    shortcut_path: str = ""
    launch_options: str = ""
    is_hidden: int = 0
    allow_desktop_config: int = 1
    allow_overlay: int = 1
    open_vr: int = 0
    devkit: int = 0
    devkit_game_id: str = ""
    devkit_override_app_id: int = 0
    last_play_time: int = 0
    flatpak_app_id: str = ""
    tags: Dict[str, str] = field(default_factory=dict)

    def to_vdf(self) -> Dict[str, Any]:
        """Steam's field names, in the order Steam writes them"""
        return {
            'appid': to_signed_app_id(self.app_id),
            'AppName': self.app_name,
            'Exe': self.exe,
            'StartDir': self.start_dir,
            'icon': self.icon,
            'ShortcutPath': self.shortcut_path,
            'LaunchOptions': self.launch_options,
            'IsHidden': self.is_hidden,
            'AllowDesktopConfig': self.allow_desktop_config,
            'AllowOverlay': self.allow_overlay,
            'OpenVR': self.open_vr,
            'Devkit': self.devkit,
            'DevkitGameID': self.devkit_game_id,
            'DevkitOverrideAppID': self.devkit_override_app_id,
            'LastPlayTime': self.last_play_time,
            'FlatpakAppID': self.flatpak_app_id,
            'tags': dict(self.tags),
        }


@dataclass
class EditResult:
    """Outcome of an orchestrated edit, for the calling shell process"""
    status: str
    message: str
    path: Optional[str] = None
    index: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in _OK_STATUSES


def generate_app_id(exe: str, name: str) -> int:
    """Generate AppID for a non-Steam shortcut using CRC32"""
    key = f"{exe}{name}"
    crc = binascii.crc32(key.encode('utf-8')) & 0xFFFFFFFF
    return crc | 0x80000000


def to_signed_app_id(app_id: int) -> int:
    # binary VDF stores appid as int32
    return struct.unpack('<i', struct.pack('<I', app_id & 0xFFFFFFFF))[0]


def _entry_name(entry) -> Optional[str]:
    if not isinstance(entry, dict):
        return None
    # Older Steam builds wrote the key in lowercase
    return entry.get('AppName', entry.get('appname'))


def find_entry(document: Dict[str, Any], name: str) -> Optional[str]:
    """Return the index key of the first entry whose AppName is name"""
    for idx, entry in document.get('shortcuts', {}).items():
        if _entry_name(entry) == name:
            return idx
    return None


def has_entry(document: Dict[str, Any], name: str) -> bool:
    """Check whether an entry with this exact (case-sensitive) AppName exists"""
    return find_entry(document, name) is not None


def _is_decimal(key) -> bool:
    # str.isdigit() also accepts '²' and friends, which int() rejects
    return isinstance(key, str) and key.isascii() and key.isdigit()


def next_index(shortcuts: Dict[str, Any]) -> str:
    """Next free index: one past the highest numeric key, "0" when empty. Gaps are kept."""
    existing_indices = [int(k) for k in shortcuts.keys() if _is_decimal(k)]
    return str(max(existing_indices, default=-1) + 1)


def insert_entry(document: Dict[str, Any], entry: ShortcutEntry) -> str:
    """
    Append entry to the shortcuts mapping under the next free index.

    Does not check for duplicates; call has_entry first.

    Returns:
        The index key the entry was stored under
    """
    shortcuts = document.setdefault('shortcuts', {})
    idx = next_index(shortcuts)
    shortcuts[idx] = entry.to_vdf() if isinstance(entry, ShortcutEntry) else entry
    logger.debug(f"[Shortcuts] Inserted '{_entry_name(shortcuts[idx])}' at index {idx}")
    return idx


def register_entry(document: Dict[str, Any], entry: ShortcutEntry) -> str:
    """Check-then-insert. Raises DuplicateEntry if the name is taken."""
    existing = find_entry(document, entry.app_name)
    if existing is not None:
        raise DuplicateEntry(f"'{entry.app_name}' already registered at index {existing}", index=existing)
    return insert_entry(document, entry)


def remove_entry(document: Dict[str, Any], name: str) -> int:
    """Delete every entry named name. Remaining keys are not renumbered."""
    shortcuts = document.get('shortcuts', {})
    doomed = [idx for idx, entry in shortcuts.items() if _entry_name(entry) == name]
    for idx in doomed:
        del shortcuts[idx]
    return len(doomed)


def build_return_entry(config: EditorConfig) -> ShortcutEntry:
    """Build the "Return to Desktop" shortcut pointing at the installed script"""
    exe = config.return_script
    return ShortcutEntry(
        app_name=config.entry_name,
        exe=exe,
        start_dir=os.path.dirname(exe),
        icon=config.icon,
        app_id=generate_app_id(exe, config.entry_name),
    )


def _load_located(config: EditorConfig):
    """Locate and decode shortcuts.vdf, or return a failed EditResult"""
    path = locate_document(config)
    if path is None:
        return None, EditResult(NOT_FOUND, "Steam shortcuts file not found (is Steam installed and logged in?)")

    try:
        document = load_shortcuts_vdf(path)
    except NotFoundError as e:
        logger.error(f"[Shortcuts] {e}")
        return None, EditResult(NOT_FOUND, f"Steam shortcuts file not found at {path}", str(path))
    except DecodeError as e:
        # Never write back a document we could not fully read
        logger.error(f"[Shortcuts] {e}")
        return None, EditResult(DECODE_ERROR, f"Could not read {path}, leaving it untouched: {e}", str(path))

    return (path, document), None


def ensure_return_to_desktop_shortcut(config: Optional[EditorConfig] = None) -> EditResult:
    """
    Make sure the "Return to Desktop" shortcut is registered.

    Safe to re-run: an existing entry with the same name is left alone and
    nothing is written. Steam must not be running, otherwise it overwrites
    the file with its cached copy on exit.
    """
    if config is None:
        config = EditorConfig.from_environment()

    located, failure = _load_located(config)
    if failure:
        return failure
    path, document = located

    entry = build_return_entry(config)
    try:
        idx = register_entry(document, entry)
    except DuplicateEntry as e:
        logger.info(f"[Shortcuts] {e}")
        return EditResult(
            ALREADY_PRESENT,
            f"'{config.entry_name}' shortcut already present in Steam",
            str(path),
            e.index,
        )

    try:
        save_shortcuts_vdf(path, document, config.backup_suffix)
    except WriteError as e:
        logger.error(f"[Shortcuts] {e}")
        return EditResult(WRITE_ERROR, f"Failed to write {path}: {e}", str(path))

    logger.info(f"[Shortcuts] Added '{entry.app_name}' (appid {entry.app_id}) at index {idx}")
    return EditResult(ADDED, f"'{entry.app_name}' shortcut added to Steam", str(path), idx)


def remove_return_to_desktop_shortcut(config: Optional[EditorConfig] = None) -> EditResult:
    """Remove the "Return to Desktop" shortcut if it is registered"""
    if config is None:
        config = EditorConfig.from_environment()

    located, failure = _load_located(config)
    if failure:
        return failure
    path, document = located

    removed = remove_entry(document, config.entry_name)
    if not removed:
        return EditResult(ABSENT, f"'{config.entry_name}' shortcut is not registered", str(path))

    try:
        save_shortcuts_vdf(path, document, config.backup_suffix)
    except WriteError as e:
        logger.error(f"[Shortcuts] {e}")
        return EditResult(WRITE_ERROR, f"Failed to write {path}: {e}", str(path))

    logger.info(f"[Shortcuts] Removed {removed} '{config.entry_name}' shortcut(s)")
    return EditResult(REMOVED, f"'{config.entry_name}' shortcut removed from Steam", str(path))
