"""Error kinds raised while reading or writing Steam's shortcuts.vdf."""


class ShortcutsError(Exception):
    """Base class for shortcut registry failures"""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class NotFoundError(ShortcutsError):
    """No shortcuts.vdf could be located, or the given path does not exist"""


class DecodeError(ShortcutsError):
    """File contents are not a well-formed binary VDF shortcuts document"""


class DuplicateEntry(ShortcutsError):
    """An entry with the same AppName is already registered (treated as a no-op)"""

    def __init__(self, message: str, path=None, index=None):
        super().__init__(message, path)
        self.index = index


class WriteError(ShortcutsError):
    """Backing up or writing shortcuts.vdf failed"""
