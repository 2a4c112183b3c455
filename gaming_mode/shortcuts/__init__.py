from .vdf import (
    decode_shortcuts, encode_shortcuts,
    load_shortcuts_vdf, save_shortcuts_vdf, restore_shortcuts_backup,
)
from .editor import (
    ShortcutEntry, EditResult,
    generate_app_id, to_signed_app_id,
    find_entry, has_entry, next_index, insert_entry, register_entry, remove_entry,
    build_return_entry,
    ensure_return_to_desktop_shortcut, remove_return_to_desktop_shortcut,
)
