"""Client settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from twittersocial.auth import OAuthCredentials

DEFAULT_API_URL = "https://api.twitter.com/1/"
DEFAULT_SEARCH_URL = "https://search.twitter.com/search.json"
DEFAULT_TIMEOUT = 30.0


def _timeout_from_env() -> float:
    raw = os.environ.get("TWITTER_TIMEOUT") or None
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"TWITTER_TIMEOUT must be a number of seconds, got {raw!r}") from None


@dataclass
class TwitterSettings:
    consumer_key: str | None = None
    consumer_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None
    api_url: str = DEFAULT_API_URL
    search_url: str = DEFAULT_SEARCH_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> TwitterSettings:
        """Read settings from environment variables.

        Reads:
            TWITTER_CONSUMER_KEY, TWITTER_CONSUMER_SECRET
            TWITTER_ACCESS_TOKEN, TWITTER_ACCESS_TOKEN_SECRET
            TWITTER_API_URL     (default: https://api.twitter.com/1/)
            TWITTER_SEARCH_URL  (default: https://search.twitter.com/search.json)
            TWITTER_TIMEOUT     (seconds, default: 30)
        """
        return cls(
            consumer_key=os.environ.get("TWITTER_CONSUMER_KEY") or None,
            consumer_secret=os.environ.get("TWITTER_CONSUMER_SECRET") or None,
            access_token=os.environ.get("TWITTER_ACCESS_TOKEN") or None,
            access_token_secret=os.environ.get("TWITTER_ACCESS_TOKEN_SECRET") or None,
            api_url=os.environ.get("TWITTER_API_URL") or DEFAULT_API_URL,
            search_url=os.environ.get("TWITTER_SEARCH_URL") or DEFAULT_SEARCH_URL,
            timeout=_timeout_from_env(),
        )

    @property
    def credentials(self) -> OAuthCredentials | None:
        """OAuth credentials, or ``None`` unless all four values are set."""
        if not (
            self.consumer_key
            and self.consumer_secret
            and self.access_token
            and self.access_token_secret
        ):
            return None
        return OAuthCredentials(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            access_token=self.access_token,
            access_token_secret=self.access_token_secret,
        )
