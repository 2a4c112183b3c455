"""Gaming mode file path constants."""

import os


# Helper scripts installed by setup-gaming-mode.sh
SYSTEM_BIN_DIR = "/usr/local/bin"
SWITCH_TO_GAMING_PATH = os.path.join(SYSTEM_BIN_DIR, "switch-to-gaming")
RETURN_TO_DESKTOP_PATH = os.path.join(SYSTEM_BIN_DIR, "return-to-desktop")

# Display name of the shortcut shown in Big Picture
RETURN_TO_DESKTOP_NAME = "Return to Desktop"

# Steam userdata roots, relative to the home directory, tried in order
STEAM_USERDATA_CANDIDATES = (
    os.path.join(".steam", "steam", "userdata"),
    os.path.join(".local", "share", "Steam", "userdata"),
    # Flatpak install
    os.path.join(".var", "app", "com.valvesoftware.Steam", "data", "Steam", "userdata"),
)

# Relative to userdata/<account id>/
SHORTCUTS_RELATIVE_PATH = os.path.join("config", "shortcuts.vdf")

BACKUP_SUFFIX = ".backup"
