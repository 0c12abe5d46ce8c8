"""Fetch results that keep "no data yet" apart from "could not load"."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from fintrack.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FetchStatus(str, Enum):
    """Outcome of a display read."""

    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Value of a read together with how the read went."""

    status: FetchStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.OK

    @property
    def empty(self) -> bool:
        return self.status == FetchStatus.EMPTY

    @property
    def failed(self) -> bool:
        return self.status == FetchStatus.ERROR

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(status=FetchStatus.OK, value=value)

    @classmethod
    def nothing(cls, value: Optional[T] = None) -> "FetchResult[T]":
        return cls(status=FetchStatus.EMPTY, value=value)

    @classmethod
    def failure(cls, message: str) -> "FetchResult[T]":
        return cls(status=FetchStatus.ERROR, error=message)


def fetch(
    loader: Callable[[], T], is_empty: Optional[Callable[[T], bool]] = None
) -> FetchResult[T]:
    """Run a read and classify its outcome.

    Args:
        loader: Zero-argument callable performing the read
        is_empty: Optional predicate deciding emptiness; defaults to
            ``not value`` for sized values

    Returns:
        FetchResult with status OK, EMPTY or ERROR. Only an unreachable
        store is turned into ERROR; other errors propagate.
    """
    try:
        value = loader()
    except StoreUnavailableError as e:
        logger.error("Fetch failed: %s", e)
        return FetchResult.failure(str(e))

    if is_empty is None:
        empty = value is None or (hasattr(value, "__len__") and len(value) == 0)
    else:
        empty = is_empty(value)

    if empty:
        return FetchResult.nothing(value)
    return FetchResult.success(value)
