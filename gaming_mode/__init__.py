# Gaming Mode package
# Registers the "Return to Desktop" non-Steam shortcut used by the Hyprland <-> gamescope toggle.

from .config import EditorConfig
from .errors import ShortcutsError, NotFoundError, DecodeError, DuplicateEntry, WriteError
from .shortcuts import (
    EditResult,
    ShortcutEntry,
    ensure_return_to_desktop_shortcut,
    remove_return_to_desktop_shortcut,
)

__version__ = "0.1.0"
