from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


@dataclass(frozen=True, slots=True)
class Outcome:
    ok: bool
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "Outcome":
        return cls(True, None)

    @classmethod
    def failure(cls, message: str) -> "Outcome":
        if not message:
            raise ValueError("a failed outcome needs a message")
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.ok


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"  # silent, no message
    EMPTY = "empty"
    PARSE_ERROR = "parse_error"
    STRUCTURE_ERROR = "structure_error"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """
    Result of load_json.

    `status` tells the cases apart. `outcome` gives the older view where a
    missing file is a failure without a message.
    Unpacks as (value, outcome).
    """

    value: Any
    status: LoadStatus
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK

    @property
    def not_found(self) -> bool:
        return self.status is LoadStatus.NOT_FOUND

    @property
    def outcome(self) -> Outcome:
        if self.ok:
            return Outcome.success()
        if self.not_found:
            return Outcome(False, None)
        return Outcome.failure(self.message or f"Loading failed ({self.status.value}).")

    def __bool__(self) -> bool:
        return self.ok

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.outcome
