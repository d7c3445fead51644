from __future__ import annotations

import logging
import os
from pathlib import Path

from ark_smart_breeding.config import DEFAULT_LAYOUT, StorageLayout
from ark_smart_breeding.models import Outcome
from ark_smart_breeding.paths import PathLike

log = logging.getLogger(__name__)


def ensure_directory(path: PathLike) -> Outcome:
    """Creates path and any missing parents. Ok if it already exists."""
    path = Path(path)
    if path.is_dir():
        return Outcome.success()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.warning("Creating directory %s failed: %s", path, e)
        return Outcome.failure(str(e) or type(e).__name__)
    return Outcome.success()


def try_delete(path: PathLike) -> bool:
    path = Path(path)
    if not path.is_file():
        return False
    try:
        path.unlink()
    except OSError as e:
        log.debug("Deleting %s failed: %s", path, e)
        return False
    return True


def try_move(src: PathLike, dst: PathLike) -> bool:
    # overwrite behaviour is up to the filesystem (os.rename)
    src = Path(src)
    if not src.is_file():
        return False
    try:
        os.rename(src, dst)
    except OSError as e:
        log.debug("Moving %s to %s failed: %s", src, dst, e)
        return False
    return True


def probe_write_privilege(directory: PathLike, layout: StorageLayout = DEFAULT_LAYOUT) -> bool:
    """
    Returns True if writing into directory needs elevated privileges.

    Used before updating the program files. Only an access denial counts,
    any other failure is treated as "no elevation needed".
    """
    probe = Path(directory) / layout.probe_file_name
    try:
        probe.write_text("", encoding="utf-8")
    except PermissionError:
        return True
    except OSError as e:
        log.debug("Write probe in %s failed: %s", directory, e)
        return False
    try_delete(probe)
    return False


def looks_like_json_object(path: PathLike) -> bool:
    """
    Very basic check that a file holds a JSON object: the trimmed text
    starts with '{' and ends with '}'. Arrays and scalars are rejected,
    broken JSON between braces is accepted.
    """
    path = Path(path)
    if not path.is_file():
        return False
    try:
        text = path.read_text(encoding="utf-8-sig").strip()
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Reading %s failed: %s", path, e)
        return False
    return text.startswith("{") and text.endswith("}")
