from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError


class GeocodingError(Exception):
    """Base class for everything this package raises."""


class InvalidFormat(GeocodingError, ValueError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"The format of the country code (`{code}`) is invalid")


class UnknownCountry(GeocodingError, ValueError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Country code `{code}` does not exist")


class TransportFailure(GeocodingError):
    """The HTTP round trip did not complete, or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


def format_error_info(status: str, error_message: Optional[str] = None) -> str:
    """"{status}: {error_message}", or the status alone when there is no message."""
    return ": ".join(part for part in (status, error_message) if part)


class RequestUnsuccessful(GeocodingError):
    """The API answered, but with a status other than OK."""

    def __init__(self, status: str, error_message: Optional[str] = None):
        self.status = status
        self.error_message = error_message
        super().__init__(self.error_info)

    @property
    def error_info(self) -> str:
        return format_error_info(self.status, self.error_message)


class NoResults(GeocodingError):
    """The API reported success but returned no results."""


class ResponseValidationError(GeocodingError):
    def __init__(self, errors: list[dict[str, Any]], original: ValidationError | None = None):
        self.errors = errors
        self.original = original
        msg = f"Malformed geocoding response ({len(errors)} problem(s))"

        super().__init__(msg)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ResponseValidationError":
        return cls(errors=list(error.errors()), original=error)

    def summary(self, limit: int = 5) -> str:
        """Human-readable summary of the first few validation issues."""
        lines = []
        for err in self.errors[:limit]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            lines.append(f"- {loc}: {err.get('msg')} ({err.get('type')})")
        if len(self.errors) > limit:
            lines.append(f"... ({len(self.errors) - limit} more)")
        return "\n".join(lines)
