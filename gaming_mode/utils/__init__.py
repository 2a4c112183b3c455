# Utils package
from .paths import (
    SWITCH_TO_GAMING_PATH,
    RETURN_TO_DESKTOP_PATH,
    RETURN_TO_DESKTOP_NAME,
    STEAM_USERDATA_CANDIDATES,
    SHORTCUTS_RELATIVE_PATH,
    BACKUP_SUFFIX,
)
from .steam_user import locate_document, is_steam_running

__all__ = [
    'SWITCH_TO_GAMING_PATH',
    'RETURN_TO_DESKTOP_PATH',
    'RETURN_TO_DESKTOP_NAME',
    'STEAM_USERDATA_CANDIDATES',
    'SHORTCUTS_RELATIVE_PATH',
    'BACKUP_SUFFIX',
    'locate_document',
    'is_steam_running',
]
