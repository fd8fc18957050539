"""Typed exceptions and HTTP error translation."""

from __future__ import annotations

from typing import Any

import httpx


class TwitterApiError(Exception):
    """Base exception for every failure reported by the Twitter API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotAuthorizedError(TwitterApiError):
    """Request lacked valid authorization (HTTP 401)."""


class MissingAuthorizationError(NotAuthorizedError):
    """Operation requires a user context but the client has no credentials."""


class RevokedAuthorizationError(NotAuthorizedError):
    """Access token was revoked or has expired."""


class InvalidRequestError(TwitterApiError):
    """Malformed request or search query (HTTP 400 / 406)."""


class RateLimitExceededError(TwitterApiError):
    """Rate limit hit (HTTP 400 with zero remaining, 420, 429)."""


class OperationNotPermittedError(TwitterApiError):
    """Request understood but refused (HTTP 403)."""


class MessageTooLongError(OperationNotPermittedError):
    """Direct message text exceeds the 140 character limit."""


class DuplicateStatusError(OperationNotPermittedError):
    """Same content was already posted."""


class InvalidMessageRecipientError(OperationNotPermittedError):
    """Recipient does not follow the sender."""


class ResourceNotFoundError(TwitterApiError):
    """Requested resource does not exist (HTTP 404)."""


class ServerError(TwitterApiError):
    """Twitter-side failure (HTTP 5xx)."""


class InternalServerError(ServerError):
    """HTTP 500."""


class ServerDownError(ServerError):
    """HTTP 502."""


class ServerOverloadedError(ServerError):
    """HTTP 503."""


class ResponseParseError(TwitterApiError):
    """Response body could not be mapped onto the expected model."""


_SERVER_ERRORS: dict[int, type[ServerError]] = {
    500: InternalServerError,
    502: ServerDownError,
    503: ServerOverloadedError,
}

# (substring, exception) pairs checked against lower-cased 403 messages
_FORBIDDEN_MESSAGES: list[tuple[str, type[OperationNotPermittedError]]] = [
    ("over 140 characters", MessageTooLongError),
    ("too long", MessageTooLongError),
    ("duplicate", DuplicateStatusError),
    ("already said that", DuplicateStatusError),
    ("not following you", InvalidMessageRecipientError),
]


def extract_error_message(response: httpx.Response) -> str:
    """Pull the human-readable error text out of an error response.

    Twitter has used three body shapes over time::

        {"error": "..."}
        {"errors": "..."}
        {"errors": [{"message": "...", "code": 34}]}

    Falls back to the HTTP reason phrase when none of them match.
    """
    try:
        body: Any = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        if isinstance(body.get("error"), str):
            return body["error"]
        errors = body.get("errors")
        if isinstance(errors, str):
            return errors
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"


def translate_error(response: httpx.Response) -> TwitterApiError:
    """Map a non-2xx response onto the matching :class:`TwitterApiError`."""
    status = response.status_code
    message = extract_error_message(response)

    if status == 401:
        if "could not authenticate you" in message.lower():
            return MissingAuthorizationError(message, status)
        if "invalid / expired token" in message.lower():
            return RevokedAuthorizationError(message, status)
        return NotAuthorizedError(message, status)

    if status == 400:
        if response.headers.get("X-RateLimit-Remaining") == "0":
            return RateLimitExceededError(message, status)
        return InvalidRequestError(message, status)

    if status == 406:
        return InvalidRequestError(message, status)

    if status == 403:
        lowered = message.lower()
        for needle, exc_cls in _FORBIDDEN_MESSAGES:
            if needle in lowered:
                return exc_cls(message, status)
        return OperationNotPermittedError(message, status)

    if status == 404:
        return ResourceNotFoundError(message, status)

    if status in (420, 429):
        return RateLimitExceededError(message, status)

    if status >= 500:
        return _SERVER_ERRORS.get(status, ServerError)(message, status)

    return TwitterApiError(message, status)
