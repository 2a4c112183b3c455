"""
Editor configuration.

Everything the shortcut editor would otherwise read ambiently (home directory,
Steam install location, installed script paths) is collected here so the
editor can be pointed at a temporary directory in tests.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .utils.paths import (
    RETURN_TO_DESKTOP_PATH,
    RETURN_TO_DESKTOP_NAME,
    STEAM_USERDATA_CANDIDATES,
    SHORTCUTS_RELATIVE_PATH,
    BACKUP_SUFFIX,
)

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Paths and fixed values used when registering the shortcut"""
    home: Path
    userdata_candidates: Tuple[Path, ...] = ()
    shortcuts_relative_path: str = SHORTCUTS_RELATIVE_PATH
    return_script: str = RETURN_TO_DESKTOP_PATH
    entry_name: str = RETURN_TO_DESKTOP_NAME
    icon: str = ""
    backup_suffix: str = BACKUP_SUFFIX
    extra_roots: Tuple[Path, ...] = field(default=(), repr=False)

    def __post_init__(self):
        self.home = Path(self.home)
        # Relative candidates resolve against home; absolute ones stay as-is
        if not self.userdata_candidates:
            self.userdata_candidates = tuple(self.home / c for c in STEAM_USERDATA_CANDIDATES)
        else:
            self.userdata_candidates = tuple(
                Path(c) if os.path.isabs(c) else self.home / c for c in self.userdata_candidates
            )
        if self.extra_roots:
            self.userdata_candidates = tuple(Path(r) for r in self.extra_roots) + self.userdata_candidates

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> 'EditorConfig':
        """Build a config from process environment.

        Honors HOME, STEAM_ROOT (its userdata/ is tried before the defaults)
        and RETURN_TO_DESKTOP_SCRIPT. Keyword overrides win over the environment.
        """
        if environ is None:
            environ = os.environ

        home = overrides.pop('home', None) or environ.get('HOME') or str(Path.home())

        extra_roots = ()
        steam_root = environ.get('STEAM_ROOT')
        if steam_root:
            extra_roots = (Path(steam_root) / "userdata",)
            logger.debug(f"[Config] STEAM_ROOT set, trying {extra_roots[0]} first")

        kwargs = {'home': Path(home), 'extra_roots': extra_roots}
        script = environ.get('RETURN_TO_DESKTOP_SCRIPT')
        if script:
            kwargs['return_script'] = script
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
