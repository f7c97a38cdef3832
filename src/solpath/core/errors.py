class SolpathError(Exception):
    """Base error."""

class TimezoneResolutionError(SolpathError, LookupError):
    """Raised when an IANA timezone identifier cannot be resolved."""

    def __init__(self, timezone_id: object, reason: str = "") -> None:
        self.timezone_id = timezone_id
        msg = f"Invalid or unknown IANA timezone identifier: {timezone_id!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

class InvalidCoordinateError(SolpathError, ValueError):
    """Raised when a latitude/longitude pair is outside the geographic ranges."""
