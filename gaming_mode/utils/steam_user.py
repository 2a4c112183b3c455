"""
Steam User Detection Utilities

Finds the shortcuts.vdf belonging to a Steam account by scanning the userdata
directories under the user's home, and checks whether Steam is running.
"""

import os
import logging
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def locate_document(config) -> Optional[Path]:
    """
    Find shortcuts.vdf for the first Steam account found.

    Candidate userdata roots are tried in order. The first root containing a
    numeric (account id) subdirectory wins, and within it the first numeric
    directory in listing order is used. With several accounts on one machine
    this does not pick the logged-in one.

    Args:
        config: EditorConfig supplying the candidate roots and relative path

    Returns:
        Path to shortcuts.vdf (which may not exist yet) or None
    """
    for root in config.userdata_candidates:
        if not os.path.isdir(root):
            logger.debug(f"[SteamUser] No userdata at {root}")
            continue

        for name in os.listdir(root):
            if not (name.isascii() and name.isdigit()):
                continue
            if not os.path.isdir(os.path.join(root, name)):
                continue

            shortcuts_path = Path(root) / name / config.shortcuts_relative_path
            logger.info(f"[SteamUser] Using shortcuts.vdf for user {name}: {shortcuts_path}")
            return shortcuts_path

        logger.debug(f"[SteamUser] {root} has no account directories")

    logger.warning("[SteamUser] Could not find a Steam userdata directory")
    return None


def is_steam_running() -> bool:
    """Check for a running Steam client.

    Steam rewrites shortcuts.vdf from its own cache on exit, so edits made
    while it runs are lost.
    """
    try:
        result = subprocess.run(
            ["pgrep", "-x", "steam"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        logger.warning("[SteamUser] pgrep not available, assuming Steam is not running")
        return False
    return result.returncode == 0
