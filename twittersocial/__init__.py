"""Async client for the Twitter direct message, search, trends and saved-search APIs."""

from twittersocial.auth import OAuth1Auth, OAuthCredentials
from twittersocial.client import TwitterClient
from twittersocial.core.config import TwitterSettings
from twittersocial.errors import (
    DuplicateStatusError,
    InternalServerError,
    InvalidMessageRecipientError,
    InvalidRequestError,
    MessageTooLongError,
    MissingAuthorizationError,
    NotAuthorizedError,
    OperationNotPermittedError,
    RateLimitExceededError,
    ResourceNotFoundError,
    ResponseParseError,
    RevokedAuthorizationError,
    ServerDownError,
    ServerError,
    ServerOverloadedError,
    TwitterApiError,
)
from twittersocial.models import (
    DirectMessage,
    SavedSearch,
    SearchResults,
    Trend,
    Trends,
    Tweet,
    TwitterProfile,
)

__version__ = "0.1.0"

__all__ = [
    "DirectMessage",
    "DuplicateStatusError",
    "InternalServerError",
    "InvalidMessageRecipientError",
    "InvalidRequestError",
    "MessageTooLongError",
    "MissingAuthorizationError",
    "NotAuthorizedError",
    "OAuth1Auth",
    "OAuthCredentials",
    "OperationNotPermittedError",
    "RateLimitExceededError",
    "ResourceNotFoundError",
    "ResponseParseError",
    "RevokedAuthorizationError",
    "SavedSearch",
    "SearchResults",
    "ServerDownError",
    "ServerError",
    "ServerOverloadedError",
    "Trend",
    "Trends",
    "Tweet",
    "TwitterApiError",
    "TwitterClient",
    "TwitterProfile",
    "TwitterSettings",
]
