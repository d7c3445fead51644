# ark_smart_breeding/app.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, Callable, Optional, TextIO, Union

from ark_smart_breeding import fileops, paths, storage
from ark_smart_breeding.config import DEFAULT_LAYOUT, StorageLayout
from ark_smart_breeding.models import LoadResult, Outcome
from ark_smart_breeding.paths import PathLike
from ark_smart_breeding.storage import DEFAULT_CODEC, JsonCodec

log = logging.getLogger(__name__)


class FileService:
    """
    Single place that knows where the data files are and how they are stored.

    `installed` is either a flag or a callable asked on every lookup, so an
    installer check that changes at runtime is picked up.
    """

    def __init__(
        self,
        installed: Union[bool, Callable[[], bool]] = False,
        exe_path: Optional[PathLike] = None,
        app_data_root: Optional[PathLike] = None,
        layout: StorageLayout = DEFAULT_LAYOUT,
        codec: JsonCodec = DEFAULT_CODEC,
    ) -> None:
        self._installed = installed
        self.exe_path = Path(exe_path) if exe_path is not None else paths.executable_path()
        self.app_data_root = Path(app_data_root) if app_data_root is not None else None
        self.layout = layout
        self.codec = codec

    @property
    def installed(self) -> bool:
        if callable(self._installed):
            return bool(self._installed())
        return bool(self._installed)

    # ---- paths ----
    def resolve_base_path(self) -> Path:
        return paths.resolve_base_path(
            self.installed, self.exe_path, self.app_data_root, self.layout
        )

    def resolve_path(self, file_name: Optional[str] = None) -> Path:
        return paths.resolve_path(self.resolve_base_path(), file_name)

    def resolve_data_path(
        self, file_name: Optional[str] = None, sub_segment: Optional[str] = None
    ) -> Path:
        return paths.resolve_data_path(
            self.resolve_base_path(), file_name, sub_segment, self.layout
        )

    def mod_manifest_path(self) -> Path:
        return self.resolve_data_path(self.layout.values_folder, self.layout.mods_manifest)

    # ---- persistence ----
    def save_json(self, path: PathLike, value: Any) -> Outcome:
        return storage.save_json(path, value, self.codec)

    def load_json(
        self, path: PathLike, factory: Optional[Callable[[Any], Any]] = None
    ) -> LoadResult:
        return storage.load_json(path, factory, self.codec)

    def open_json_reader(self, file_name: str) -> TextIO:
        return storage.open_json_reader(file_name, self.resolve_base_path(), self.layout)

    def open_json_stream(self, file_name: str) -> BinaryIO:
        return storage.open_json_stream(file_name, self.resolve_base_path(), self.layout)

    # ---- file safety ----
    def ensure_directory(self, path: PathLike) -> Outcome:
        return fileops.ensure_directory(path)

    def ensure_data_directory(self) -> Outcome:
        return fileops.ensure_directory(self.resolve_data_path())

    def try_delete(self, path: PathLike) -> bool:
        return fileops.try_delete(path)

    def try_move(self, src: PathLike, dst: PathLike) -> bool:
        return fileops.try_move(src, dst)

    def probe_write_privilege(self, directory: PathLike) -> bool:
        return fileops.probe_write_privilege(directory, self.layout)

    def looks_like_json_object(self, path: PathLike) -> bool:
        return fileops.looks_like_json_object(path)


def create_file_service(installed: Union[bool, Callable[[], bool]] = False) -> FileService:
    service = FileService(installed=installed)
    log.info("Data folder: %s", service.resolve_data_path())
    return service
