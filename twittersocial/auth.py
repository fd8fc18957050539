"""OAuth 1.0a (HMAC-SHA1) request signing as an ``httpx.Auth``."""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from collections.abc import Generator
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote

import httpx

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class OAuthCredentials:
    """Application (consumer) and user (access token) key pairs."""

    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str


def percent_encode(value: str) -> str:
    """RFC 3986 encoding: everything but ``A-Z a-z 0-9 - . _ ~``."""
    return quote(value, safe="~")


class OAuth1Auth(httpx.Auth):
    """Adds an OAuth 1.0a ``Authorization`` header to every request.

    Query parameters and urlencoded form fields both go into the signature
    base string, so the request body must be available before signing.
    """

    requires_request_body = True

    def __init__(self, credentials: OAuthCredentials) -> None:
        self.credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        params = list(request.url.params.multi_items())
        content_type = request.headers.get("Content-Type", "")
        if content_type.startswith(_FORM_CONTENT_TYPE) and request.content:
            params.extend(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))

        base_url = str(request.url.copy_with(query=None, fragment=None))
        request.headers["Authorization"] = self.authorization_header(
            request.method, base_url, params
        )
        yield request

    def authorization_header(
        self,
        method: str,
        url: str,
        params: list[tuple[str, str]],
        *,
        nonce: str | None = None,
        timestamp: int | None = None,
    ) -> str:
        oauth_params = {
            "oauth_consumer_key": self.credentials.consumer_key,
            "oauth_nonce": nonce or uuid.uuid4().hex,
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": str(timestamp if timestamp is not None else int(time.time())),
            "oauth_token": self.credentials.access_token,
            "oauth_version": "1.0",
        }
        oauth_params["oauth_signature"] = self.sign(
            method, url, params + list(oauth_params.items())
        )
        return "OAuth " + ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
        )

    def sign(self, method: str, url: str, params: list[tuple[str, str]]) -> str:
        """Return the base64 HMAC-SHA1 signature for a request."""
        encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params)
        normalized = "&".join(f"{k}={v}" for k, v in encoded)
        base_string = "&".join(
            [method.upper(), percent_encode(url), percent_encode(normalized)]
        )
        key = (
            f"{percent_encode(self.credentials.consumer_secret)}"
            f"&{percent_encode(self.credentials.access_token_secret)}"
        )
        digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
        return base64.b64encode(digest).decode("ascii")
