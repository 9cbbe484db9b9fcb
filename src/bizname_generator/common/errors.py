"""Exception taxonomy raised by pipeline components."""
from __future__ import annotations

from bizname_generator.common.schema import FailureKind


class NameGenerationError(Exception):
    """Base class; every subclass carries the FailureKind it maps to."""
    kind: FailureKind

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(NameGenerationError):
    """User input is incomplete; raised before any network work."""


class MissingDescription(ValidationError):
    kind = FailureKind.MISSING_DESCRIPTION


class MissingTone(ValidationError):
    kind = FailureKind.MISSING_TONE


class TransportError(NameGenerationError):
    """
    The completion endpoint could not be reached or answered with an error.

    Args:
        detail: Provider error message or network error description.
        status: HTTP status code, None when the request never completed.
    """
    kind = FailureKind.HTTP_STATUS

    def __init__(self, detail: str = "", status: int | None = None) -> None:
        super().__init__(detail)
        self.status = status


class NetworkUnavailable(TransportError):
    kind = FailureKind.NETWORK_UNAVAILABLE


class MalformedEnvelope(NameGenerationError):
    """The provider response lacks candidates[0].content.parts[0].text."""
    kind = FailureKind.MALFORMED_ENVELOPE


class ParseError(NameGenerationError):
    """The model reply does not contain a usable JSON object."""


class NoJsonFound(ParseError):
    kind = FailureKind.NO_JSON_FOUND


class InvalidJson(ParseError):
    kind = FailureKind.INVALID_JSON
