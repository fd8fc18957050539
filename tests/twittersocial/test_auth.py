"""Tests for OAuth 1.0a signing."""

from __future__ import annotations

import httpx

from twittersocial.auth import OAuth1Auth, OAuthCredentials, percent_encode

# Worked example from Twitter's "Creating a signature" documentation.
DOC_CREDENTIALS = OAuthCredentials(
    consumer_key="xvz1evFS4wEEPTGEFPHBog",
    consumer_secret="kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
    access_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
    access_token_secret="LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
)


class TestPercentEncode:
    def test_unreserved_untouched(self):
        assert percent_encode("AZaz09-._~") == "AZaz09-._~"

    def test_reserved_encoded(self):
        assert percent_encode("Ladies + Gentlemen") == "Ladies%20%2B%20Gentlemen"
        assert percent_encode("a/b&c=d") == "a%2Fb%26c%3Dd"
        assert percent_encode("!") == "%21"


class TestSignature:
    def test_documented_example(self):
        auth = OAuth1Auth(DOC_CREDENTIALS)
        params = [
            ("status", "Hello Ladies + Gentlemen, a signed OAuth request!"),
            ("include_entities", "true"),
            ("oauth_consumer_key", DOC_CREDENTIALS.consumer_key),
            ("oauth_nonce", "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"),
            ("oauth_signature_method", "HMAC-SHA1"),
            ("oauth_timestamp", "1318622958"),
            ("oauth_token", DOC_CREDENTIALS.access_token),
            ("oauth_version", "1.0"),
        ]
        signature = auth.sign("post", "https://api.twitter.com/1.1/statuses/update.json", params)
        assert signature == "hCtSmYh+iHYCEqBWrE7C7hYmtUk="

    def test_header_is_deterministic_with_fixed_nonce(self):
        auth = OAuth1Auth(DOC_CREDENTIALS)
        kwargs = {"nonce": "abc", "timestamp": 1318622958}
        first = auth.authorization_header("GET", "https://api.twitter.com/1/x.json", [], **kwargs)
        second = auth.authorization_header("GET", "https://api.twitter.com/1/x.json", [], **kwargs)
        assert first == second
        assert first.startswith('OAuth oauth_consumer_key="xvz1evFS4wEEPTGEFPHBog", ')
        assert 'oauth_nonce="abc"' in first
        assert 'oauth_timestamp="1318622958"' in first
        assert 'oauth_version="1.0"' in first
        assert "oauth_signature=" in first

    def test_header_changes_with_params(self):
        auth = OAuth1Auth(DOC_CREDENTIALS)
        kwargs = {"nonce": "abc", "timestamp": 1}
        a = auth.authorization_header("GET", "https://x/y", [("page", "1")], **kwargs)
        b = auth.authorization_header("GET", "https://x/y", [("page", "2")], **kwargs)
        assert a != b


class TestAuthFlow:
    def test_signs_query_and_form_params(self):
        auth = OAuth1Auth(DOC_CREDENTIALS)
        request = httpx.Request(
            "POST",
            "https://api.twitter.com/1/direct_messages/new.json?page=1",
            data={"screen_name": "habuma", "text": "Hello there!"},
        )
        request.read()
        captured = {}

        def fake_header(method, url, params, **kwargs):
            captured.update(method=method, url=url, params=params)
            return "OAuth test"

        auth.authorization_header = fake_header  # type: ignore[method-assign]
        signed = next(auth.auth_flow(request))

        assert signed.headers["Authorization"] == "OAuth test"
        assert captured["method"] == "POST"
        assert captured["url"] == "https://api.twitter.com/1/direct_messages/new.json"
        assert sorted(captured["params"]) == [
            ("page", "1"),
            ("screen_name", "habuma"),
            ("text", "Hello there!"),
        ]

    def test_get_without_body(self):
        auth = OAuth1Auth(DOC_CREDENTIALS)
        request = httpx.Request("GET", "https://api.twitter.com/1/trends/daily.json")
        signed = next(auth.auth_flow(request))
        assert signed.headers["Authorization"].startswith("OAuth ")
