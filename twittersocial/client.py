"""Async Twitter REST/Search API client."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from twittersocial.auth import OAuth1Auth, OAuthCredentials
from twittersocial.core.config import TwitterSettings
from twittersocial.errors import MissingAuthorizationError, ResponseParseError, translate_error
from twittersocial.operations.direct_messages import DirectMessageOperations
from twittersocial.operations.search import SearchOperations

log = structlog.get_logger("twittersocial.client")


class TwitterClient:
    """Thin async wrapper around the Twitter v1 REST and Search APIs.

    Operations are grouped by area::

        async with TwitterClient(credentials) as twitter:
            messages = await twitter.direct_messages.get_direct_messages_received()
            results = await twitter.search.search("#python")

    Without *credentials* only the operations that need no user context
    (search and trends) are available; the rest raise
    :class:`MissingAuthorizationError` without touching the network.
    """

    def __init__(
        self,
        credentials: OAuthCredentials | None = None,
        *,
        settings: TwitterSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or TwitterSettings()
        self._credentials = credentials
        self._client = httpx.AsyncClient(
            base_url=self.settings.api_url,
            headers={"Accept": "application/json"},
            auth=OAuth1Auth(credentials) if credentials else None,
            timeout=self.settings.timeout,
            transport=transport,
        )
        self.direct_messages = DirectMessageOperations(self)
        self.search = SearchOperations(self)

    @classmethod
    def from_settings(
        cls,
        settings: TwitterSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> TwitterClient:
        return cls(settings.credentials, settings=settings, transport=transport)

    @property
    def is_authorized(self) -> bool:
        return self._credentials is not None

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> TwitterClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── internal ───────────────────────────────────────────────────────────

    def _require_authorization(self) -> None:
        if not self.is_authorized:
            raise MissingAuthorizationError(
                "this operation requires an authorized client (OAuth credentials missing)"
            )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        authorized: bool = False,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        *url* is either relative to ``settings.api_url`` or absolute.
        Non-2xx responses are raised as the matching
        :class:`~twittersocial.errors.TwitterApiError`; an empty body
        decodes to ``None``.
        """
        if authorized:
            self._require_authorization()

        log.debug("twitter.request", method=method, url=url, params=params)
        response = await self._client.request(method, url, params=params, data=data)

        if response.is_error:
            error = translate_error(response)
            log.warning(
                "twitter.api_error",
                method=method,
                url=str(response.request.url),
                status=response.status_code,
                error=error.message,
            )
            raise error

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseParseError(
                f"response from {url} is not valid JSON", response.status_code
            ) from exc
