"""
Exception hierarchy for the Pinport client library.

Request errors map HTTP status codes from the Pinport API onto exception
classes. Each one keeps the numeric status and the parsed JSON body exactly
as the server returned it, so callers can inspect validation issues without
the client reflecting the server's error schema into its own types.

Transport failures (connection refused, DNS errors, aborted connections) and
malformed JSON bodies are not wrapped: they propagate as the exceptions
raised by httpx and the json module.
"""

from typing import Any, Dict, List
import logging

from pydantic import ValidationError as PydanticValidationError

from pinport_client.schemas import ErrorIssue

logger = logging.getLogger(__name__)


class PinportError(Exception):
    """Base exception for all Pinport client errors."""


class PinportConfigurationError(PinportError, ValueError):
    """
    The client was constructed with invalid configuration.

    Raised synchronously from the constructor, e.g. when the key is missing
    or is not a three-segment token. The instance is unusable.
    """


class PinportRequestError(PinportError):
    """
    The Pinport API answered with a status code greater than 399.

    Attributes:
        status: HTTP status code of the response
        body: Parsed JSON body of the response (any JSON value)
    """

    def __init__(self, status: int, body: Any = None):
        self.status = status
        self.body = body
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        error = self.error
        if isinstance(error, str):
            return f"{error} (HTTP {self.status})"
        if isinstance(error, dict) and isinstance(error.get("issues"), list) and error["issues"]:
            messages = [issue.get("message", "") for issue in error["issues"] if isinstance(issue, dict)]
            return f"{'; '.join(m for m in messages if m)} (HTTP {self.status})"
        return f"Pinport request failed (HTTP {self.status})"

    @property
    def error(self) -> Any:
        """The ``error`` member of the response body, if the body is an object."""
        if isinstance(self.body, dict):
            return self.body.get("error")
        return None

    @property
    def issues(self) -> List[ErrorIssue]:
        """Validation issues reported by the server, parsed into models.

        Issues that do not match ``ErrorIssue`` are skipped; the raw entries
        stay available on ``body``.
        """
        error = self.error
        if not isinstance(error, dict) or not isinstance(error.get("issues"), list):
            return []
        issues = []
        for issue in error["issues"]:
            try:
                issues.append(ErrorIssue.model_validate(issue))
            except PydanticValidationError:
                logger.debug(f"Skipping unrecognized error issue: {issue!r}")
        return issues

    def to_dict(self) -> Dict[str, Any]:
        """Return the response body merged with the status code."""
        if isinstance(self.body, dict):
            return {**self.body, "status": self.status}
        return {"body": self.body, "status": self.status}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            return self.to_dict() == other
        if isinstance(other, PinportRequestError):
            return type(self) is type(other) and self.to_dict() == other.to_dict()
        return NotImplemented

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self.status}, body={self.body!r})"


# =============================================================================
# Status-specific request errors
# =============================================================================


class ValidationError(PinportRequestError):
    """The request body was rejected (400 or 422)."""


class AuthenticationError(PinportRequestError):
    """The bearer key was not accepted (401)."""


class AuthorizationError(PinportRequestError):
    """The key is valid but not allowed to perform the operation (403)."""


class NotFoundError(PinportRequestError):
    """The requested resource does not exist (404)."""


class ConflictError(PinportRequestError):
    """The request conflicts with the current server state (409)."""


class RateLimitError(PinportRequestError):
    """Too many requests (429)."""


class ServerError(PinportRequestError):
    """The Pinport API failed to handle the request (5xx)."""


STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_from_response(status: int, body: Any = None) -> PinportRequestError:
    """
    Create the appropriate exception for an error response.

    Args:
        status: HTTP status code (expected to be greater than 399)
        body: Parsed JSON body of the response

    Returns:
        PinportRequestError subclass instance
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status)
    if exception_class is None:
        exception_class = ServerError if 500 <= status < 600 else PinportRequestError
    return exception_class(status, body)
