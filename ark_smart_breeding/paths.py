from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QStandardPaths

from ark_smart_breeding.config import DEFAULT_LAYOUT, StorageLayout

PathLike = Union[str, Path]


def executable_path() -> Path:
    """
    Returns the path of the running program.

    - In PyInstaller: the executable
    - In dev: the main script; under `python -c` or a REPL a program
      named after the app inside the package parent (run.py location)
    """
    if getattr(sys, "frozen", False):  # PyInstaller
        return Path(sys.executable).resolve()
    if sys.argv and sys.argv[0] and Path(sys.argv[0]).is_file():
        return Path(sys.argv[0]).resolve()
    return Path(__file__).resolve().parents[1] / DEFAULT_LAYOUT.fallback_app_name


def local_app_data_dir() -> Path:
    # %LOCALAPPDATA% on Windows, ~/.local/share on Linux
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.GenericDataLocation
    )
    return Path(location) if location else Path.home()


def resolve_base_path(
    installed: bool,
    exe_path: PathLike,
    app_data_root: Optional[PathLike] = None,
    layout: StorageLayout = DEFAULT_LAYOUT,
) -> Path:
    """
    Directory that holds all user data.

    Installed builds keep it in the local app data folder, named after the
    executable. Portable builds keep it next to the executable.
    Nothing is created here.
    """
    exe = Path(exe_path)
    if not installed:
        return exe.parent

    root = Path(app_data_root) if app_data_root is not None else local_app_data_dir()
    return root / (exe.stem or layout.fallback_app_name)


def _join(base: PathLike, *segments: Optional[str]) -> Path:
    out = Path(base)
    for segment in segments:
        if segment:
            out = out / segment
    return out


def resolve_path(base: PathLike, file_name: Optional[str] = None) -> Path:
    return _join(base, file_name)


def resolve_data_path(
    base: PathLike,
    file_name: Optional[str] = None,
    sub_segment: Optional[str] = None,
    layout: StorageLayout = DEFAULT_LAYOUT,
) -> Path:
    return _join(base, layout.data_folder, file_name, sub_segment)
