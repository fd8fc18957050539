"""Operation groups exposed on :class:`~twittersocial.client.TwitterClient`."""

from twittersocial.operations.direct_messages import DirectMessageOperations
from twittersocial.operations.search import SearchOperations

__all__ = ["DirectMessageOperations", "SearchOperations"]
