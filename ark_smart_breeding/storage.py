from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, BinaryIO, Callable, Optional, TextIO, Tuple, Type

from ark_smart_breeding.config import DEFAULT_LAYOUT, StorageLayout
from ark_smart_breeding.models import LoadResult, LoadStatus, Outcome
from ark_smart_breeding.paths import PathLike, resolve_data_path

log = logging.getLogger(__name__)

SERIALIZE_ERRORS: Tuple[Type[BaseException], ...] = (
    TypeError,
    ValueError,
    OverflowError,
    RecursionError,
)
STRUCTURE_ERRORS: Tuple[Type[BaseException], ...] = (
    TypeError,
    LookupError,
    ValueError,
    AttributeError,
)


class JsonCodec:
    """
    Encoding used for every stored document.

    Swap it for another object with the same three members to store
    something other than stdlib json.
    """

    decode_errors: Tuple[Type[BaseException], ...] = (ValueError, RecursionError)

    def __init__(self, indent: Optional[int] = 2, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def dump(self, value: Any, fp: IO[str]) -> None:
        json.dump(value, fp, ensure_ascii=self.ensure_ascii, indent=self.indent)

    def loads(self, text: str) -> Any:
        return json.loads(text)


DEFAULT_CODEC = JsonCodec()


def _abs(path: Path) -> str:
    return str(path.absolute())


def save_message(path: Path, error: BaseException) -> str:
    return f"File\n{_abs(path)}\ncouldn't be saved.\nErrormessage:\n\n{error}"


def read_message(path: Path, error: BaseException) -> str:
    return f"File\n{_abs(path)}\ncouldn't be opened or read.\nErrormessage:\n\n{error}"


def empty_message(path: Path) -> str:
    return f"File\n{_abs(path)}\ncontains no readable data."


def save_json(path: PathLike, value: Any, codec: JsonCodec = DEFAULT_CODEC) -> Outcome:
    """
    Writes value as JSON to path, replacing the file.

    The parent directory must exist. A failed write may leave a partial file.
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            codec.dump(value, f)
    except (OSError, *SERIALIZE_ERRORS) as e:
        log.warning("Saving %s failed: %s", path, e)
        return Outcome.failure(save_message(path, e))
    return Outcome.success()


def load_json(
    path: PathLike,
    factory: Optional[Callable[[Any], Any]] = None,
    codec: JsonCodec = DEFAULT_CODEC,
) -> LoadResult:
    """
    Reads a JSON document from path.

    A missing file gives LoadStatus.NOT_FOUND without a message; every other
    failure carries a message naming the file. `factory`, when given, turns
    the decoded JSON into the caller's model object.
    """
    path = Path(path)
    if not path.is_file():
        return LoadResult(None, LoadStatus.NOT_FOUND)

    try:
        with path.open("r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Reading %s failed: %s", path, e)
        return LoadResult(None, LoadStatus.PARSE_ERROR, read_message(path, e))

    if not text.strip():
        return LoadResult(None, LoadStatus.EMPTY, empty_message(path))

    try:
        data = codec.loads(text)
    except codec.decode_errors as e:
        log.warning("Parsing %s failed: %s", path, e)
        return LoadResult(None, LoadStatus.PARSE_ERROR, read_message(path, e))

    if data is None:
        return LoadResult(None, LoadStatus.EMPTY, empty_message(path))

    if factory is not None:
        try:
            data = factory(data)
        except STRUCTURE_ERRORS as e:
            log.warning("Unexpected structure in %s: %s", path, e)
            return LoadResult(None, LoadStatus.STRUCTURE_ERROR, read_message(path, e))
        if data is None:
            return LoadResult(None, LoadStatus.EMPTY, empty_message(path))

    return LoadResult(data, LoadStatus.OK)


def open_json_reader(
    file_name: str, base: PathLike, layout: StorageLayout = DEFAULT_LAYOUT
) -> TextIO:
    return resolve_data_path(base, file_name, layout=layout).open("r", encoding="utf-8-sig")


def open_json_stream(
    file_name: str, base: PathLike, layout: StorageLayout = DEFAULT_LAYOUT
) -> BinaryIO:
    return resolve_data_path(base, file_name, layout=layout).open("rb")
