"""Direct message operations. All of them require a user context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from twittersocial.models import DirectMessage, parse_model, parse_model_list
from twittersocial.paging import build_paging_params

if TYPE_CHECKING:
    from twittersocial.client import TwitterClient

_DEFAULT_PAGE_SIZE = 20


class DirectMessageOperations:
    def __init__(self, client: TwitterClient) -> None:
        self._client = client

    async def get_direct_messages_received(
        self,
        page: int = 1,
        page_size: int = _DEFAULT_PAGE_SIZE,
        since_id: int = 0,
        max_id: int = 0,
    ) -> list[DirectMessage]:
        """Messages sent to the authenticating user, newest first."""
        payload = await self._client._request(
            "GET",
            "direct_messages.json",
            params=build_paging_params(page, page_size, since_id, max_id),
            authorized=True,
        )
        return parse_model_list(DirectMessage, payload)

    async def get_direct_messages_sent(
        self,
        page: int = 1,
        page_size: int = _DEFAULT_PAGE_SIZE,
        since_id: int = 0,
        max_id: int = 0,
    ) -> list[DirectMessage]:
        """Messages sent by the authenticating user, newest first."""
        payload = await self._client._request(
            "GET",
            "direct_messages/sent.json",
            params=build_paging_params(page, page_size, since_id, max_id),
            authorized=True,
        )
        return parse_model_list(DirectMessage, payload)

    async def get_direct_message(self, message_id: int) -> DirectMessage:
        payload = await self._client._request(
            "GET", f"direct_messages/show/{message_id}.json", authorized=True
        )
        return parse_model(DirectMessage, payload)

    async def send_direct_message(self, recipient: str | int, text: str) -> DirectMessage:
        """Send *text* to a user given by screen name (``str``) or user ID (``int``).

        Raises :class:`~twittersocial.errors.MessageTooLongError` when Twitter
        rejects the text as too long, and
        :class:`~twittersocial.errors.InvalidMessageRecipientError` when the
        recipient does not follow the sender.
        """
        if isinstance(recipient, bool) or not isinstance(recipient, (str, int)):
            raise TypeError(f"recipient must be a screen name or user ID, got {recipient!r}")
        key = "screen_name" if isinstance(recipient, str) else "user_id"
        payload = await self._client._request(
            "POST",
            "direct_messages/new.json",
            data={key: recipient, "text": text},
            authorized=True,
        )
        return parse_model(DirectMessage, payload)

    async def delete_direct_message(self, message_id: int) -> None:
        await self._client._request(
            "DELETE", f"direct_messages/destroy/{message_id}.json", authorized=True
        )
