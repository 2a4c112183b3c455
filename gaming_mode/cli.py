#!/usr/bin/env python3
"""
Register the "Return to Desktop" shortcut in Steam.

Called by setup-gaming-mode.sh after the switch scripts are installed, so the
gamescope session can be left from Big Picture.

Usage:
  1. Close Steam completely: steam -shutdown
  2. Run: gaming-mode-shortcut add
  3. Start Steam and switch to gaming mode (Super + F12)
"""

import sys
import logging
import argparse

from .config import EditorConfig
from .errors import ShortcutsError
from .shortcuts import (
    load_shortcuts_vdf,
    restore_shortcuts_backup,
    ensure_return_to_desktop_shortcut,
    remove_return_to_desktop_shortcut,
)
from .utils.paths import SWITCH_TO_GAMING_PATH
from .utils.steam_user import locate_document, is_steam_running

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaming-mode-shortcut",
        description="Manage the 'Return to Desktop' non-Steam shortcut",
        epilog=f"Gaming mode itself is started with {SWITCH_TO_GAMING_PATH} (Super + F12).",
    )
    parser.add_argument("command", nargs="?", default="add",
                        choices=["add", "remove", "list", "restore"],
                        help="Action to perform (default: add)")
    parser.add_argument("--home", default=None,
                        help="Home directory to search for Steam userdata (default: $HOME)")
    parser.add_argument("--script", default=None,
                        help="Path of the installed return-to-desktop script")
    parser.add_argument("--name", default=None,
                        help="Display name of the shortcut")
    parser.add_argument("--force", action="store_true",
                        help="Edit shortcuts.vdf even if Steam is running")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def _list_shortcuts(config: EditorConfig) -> int:
    path = locate_document(config)
    if path is None:
        print("ERROR: No Steam user directories found!")
        return 1

    try:
        document = load_shortcuts_vdf(path)
    except ShortcutsError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Shortcuts file: {path}")
    for idx, shortcut in document['shortcuts'].items():
        if not isinstance(shortcut, dict):
            continue
        appid = shortcut.get('appid', 0)
        if isinstance(appid, int):
            appid &= 0xFFFFFFFF
        name = shortcut.get('AppName', shortcut.get('appname', 'Unknown'))
        print(f"  [{idx}] {appid!s:>10} {name}")
    print(f"Total: {len(document['shortcuts'])}")
    return 0


def _restore(config: EditorConfig) -> int:
    path = locate_document(config)
    if path is None:
        print("ERROR: No Steam user directories found!")
        return 1

    try:
        document = restore_shortcuts_backup(path, config.backup_suffix)
    except ShortcutsError as e:
        print(f"✗ Restore failed: {e}")
        return 1

    print(f"✓ Restored {len(document['shortcuts'])} shortcuts from {path}{config.backup_suffix}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    config = EditorConfig.from_environment(
        home=args.home,
        return_script=args.script,
        entry_name=args.name,
    )
    logger.debug(f"[CLI] {args.command}: searching {[str(c) for c in config.userdata_candidates]}")

    if args.command == "list":
        return _list_shortcuts(config)

    if not args.force and is_steam_running():
        print("ERROR: Steam is running. Close it first (steam -shutdown) or pass --force.")
        return 1

    if args.command == "restore":
        return _restore(config)

    if args.command == "remove":
        result = remove_return_to_desktop_shortcut(config)
    else:
        result = ensure_return_to_desktop_shortcut(config)

    if result.ok:
        print(f"✓ {result.message}")
        return 0

    print(f"✗ {result.message}")
    if result.path:
        print(f"  Original file left in place: {result.path}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
