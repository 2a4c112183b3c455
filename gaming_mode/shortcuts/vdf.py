"""VDF file utilities using the proven ValvePython vdf library"""

import os
import shutil
import struct
import logging
import tempfile
from typing import Dict, Any

import vdf

from ..errors import NotFoundError, DecodeError, WriteError
from ..utils.paths import BACKUP_SUFFIX

logger = logging.getLogger(__name__)


def decode_shortcuts(data: bytes) -> Dict[str, Any]:
    """Decode binary shortcuts.vdf bytes into a nested dict"""
    try:
        document = vdf.binary_loads(data)
    except (SyntaxError, ValueError, struct.error) as e:
        raise DecodeError(f"Malformed binary VDF: {e}") from e

    if not isinstance(document.get('shortcuts'), dict):
        raise DecodeError("Binary VDF has no 'shortcuts' section")

    # Wide strings, non-UTF-8 bytes and duplicate keys decode lossily;
    # such a document must never be written back
    try:
        reencoded = vdf.binary_dumps(document)
    except (TypeError, ValueError, struct.error) as e:
        raise DecodeError(f"Binary VDF cannot be re-encoded: {e}") from e
    if reencoded != data:
        raise DecodeError("Binary VDF would not round-trip losslessly")

    return document


def encode_shortcuts(document: Dict[str, Any]) -> bytes:
    """Encode a shortcuts document back to binary VDF"""
    return vdf.binary_dumps(document)


def load_shortcuts_vdf(path) -> Dict[str, Any]:
    """Load and parse shortcuts.vdf file using vdf library"""
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError as e:
        raise NotFoundError(f"shortcuts.vdf not found at {path}", path) from e
    except OSError as e:
        raise NotFoundError(f"Could not read {path}: {e}", path) from e

    try:
        document = decode_shortcuts(data)
    except DecodeError as e:
        e.path = path
        raise

    logger.debug(f"[Shortcuts] Loaded {len(document['shortcuts'])} shortcuts from {path}")
    return document


def _make_backup(path: str, backup_path: str) -> None:
    if not os.path.exists(path):
        return
    if os.path.exists(backup_path):
        # First backup wins
        logger.debug(f"[Shortcuts] Keeping existing backup {backup_path}")
        return
    shutil.copy2(path, backup_path)
    logger.info(f"[Shortcuts] Backup created: {backup_path}")


def save_shortcuts_vdf(path, document: Dict[str, Any], backup_suffix: str = BACKUP_SUFFIX) -> None:
    """
    Save a shortcuts document to shortcuts.vdf.

    The current file is copied to path + backup_suffix unless a backup is
    already there. The new contents go to a temporary file in the same
    directory which only replaces path after it has been validated, so the
    original survives any failure.

    Raises:
        WriteError: if the backup, the write, or the validation fails
    """
    path = os.fspath(path)
    backup_path = path + backup_suffix

    try:
        _make_backup(path, backup_path)
    except OSError as e:
        raise WriteError(f"Could not back up {path}: {e}", path) from e

    binary_data = encode_shortcuts(document)
    expected_count = len(document.get('shortcuts', {}))

    directory = os.path.dirname(path) or '.'
    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix='.shortcuts-', suffix='.vdf', dir=directory)
        with os.fdopen(fd, 'wb') as f:
            f.write(binary_data)
            f.flush()
            os.fsync(f.fileno())  # Force write to disk

        # Validate write
        with open(tmp_path, 'rb') as f:
            actual_count = len(decode_shortcuts(f.read())['shortcuts'])
        if actual_count != expected_count:
            raise WriteError(
                f"Write validation failed! Expected {expected_count}, got {actual_count}", path
            )

        os.replace(tmp_path, path)
        tmp_path = None
    except (OSError, DecodeError) as e:
        raise WriteError(f"Error saving {path}: {e}", path) from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)

    logger.info(f"[Shortcuts] Write validated: {expected_count} shortcuts persisted to {path}")


def restore_shortcuts_backup(path, backup_suffix: str = BACKUP_SUFFIX) -> Dict[str, Any]:
    """Copy the backup over shortcuts.vdf, refusing backups that do not decode"""
    path = os.fspath(path)
    backup_path = path + backup_suffix

    # Raises NotFoundError / DecodeError before anything is touched
    document = load_shortcuts_vdf(backup_path)

    try:
        shutil.copy2(backup_path, path)
    except OSError as e:
        raise WriteError(f"Could not restore {path} from {backup_path}: {e}", path) from e

    logger.info(f"[Shortcuts] Restored {len(document['shortcuts'])} shortcuts from {backup_path}")
    return document
