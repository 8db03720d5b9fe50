"""Result variants for remote lookups.

Remote failures never surface as exceptions to resolution callers. Instead,
adapters report one of three outcomes so that "no such station" stays
distinguishable from "the network is down".
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from station_id_resolver.domain.models.error_details import ErrorDetails

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The remote authority returned a usable value."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The remote authority answered, but had nothing matching."""


@dataclass(frozen=True)
class TransientFailure:
    """The remote authority could not be consulted (timeout, bad status, bad payload)."""

    details: ErrorDetails

    @classmethod
    def from_reason(cls, reason: str, status_code: int | None = None) -> "TransientFailure":
        """Build a failure from a plain reason string."""
        return cls(details=ErrorDetails(status_code=status_code, reason=reason))


Outcome = Found[T] | NotFound | TransientFailure
