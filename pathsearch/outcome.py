"""Search outcomes and the errors that can end a search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, TypeVar

R = TypeVar("R")


class PathSearchError(Exception):
    """Base class for failures reported by :mod:`pathsearch`."""


class UnreachableTargetError(PathSearchError):
    """The open set ran dry before the target was expanded."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(f"no path from {source!r} to {target!r}")
        self.source = source
        self.target = target


class MalformedPathError(PathSearchError, KeyError):
    """A predecessor chain does not lead from the target back to the source."""

    def __init__(self, node: Hashable, message: str | None = None) -> None:
        text = message or f"no predecessor recorded for {node!r}"
        super().__init__(text)
        self.node = node
        self.message = text

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise.
        return self.message


class FailureKind(str, Enum):
    """Tags for the failures a search can report without raising."""

    UNREACHABLE_TARGET = "unreachable_target"
    MALFORMED_CHAIN = "malformed_chain"


@dataclass(frozen=True, slots=True)
class SearchOutcome(Generic[R]):
    """Either the extractor's output or a tagged failure.

    ``expanded`` counts the nodes moved to the closed set, which is zero for
    the trivial ``source == target`` case.
    """

    value: R | None = None
    failure: FailureKind | None = None
    error: PathSearchError | None = None
    expanded: int = 0

    @classmethod
    def success(cls, value: R, *, expanded: int = 0) -> SearchOutcome[R]:
        return cls(value=value, expanded=expanded)

    @classmethod
    def failed(cls, error: PathSearchError, *, expanded: int = 0) -> SearchOutcome[R]:
        if isinstance(error, UnreachableTargetError):
            kind = FailureKind.UNREACHABLE_TARGET
        elif isinstance(error, MalformedPathError):
            kind = FailureKind.MALFORMED_CHAIN
        else:
            raise TypeError(f"unsupported search failure: {error!r}")
        return cls(failure=kind, error=error, expanded=expanded)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> R:
        """Return the value, or raise the error that ended the search."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = [
    "FailureKind",
    "MalformedPathError",
    "PathSearchError",
    "SearchOutcome",
    "UnreachableTargetError",
]
