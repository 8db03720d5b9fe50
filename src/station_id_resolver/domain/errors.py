"""Domain errors for station identifier resolution."""


class StationResolutionError(Exception):
    """Base class for resolution errors."""


class UnknownRailwayError(StationResolutionError):
    """The line name has no entry in the railway catalog."""

    def __init__(self, line_name: str) -> None:
        self.line_name = line_name
        super().__init__(f"Unknown railway: {line_name!r}")


class MalformedRailwayIdError(StationResolutionError):
    """A railway catalog entry is not of the form <namespace>:<Operator>.<Line>."""

    def __init__(self, railway_id: str) -> None:
        self.railway_id = railway_id
        super().__init__(f"Malformed railway identifier: {railway_id!r}")


class RemoteUnavailableError(StationResolutionError):
    """A remote authority timed out, answered with a bad status or a malformed payload.

    Raised and caught inside adapters only; callers see a TransientFailure.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason if status_code is None else f"{reason} (status {status_code})")
