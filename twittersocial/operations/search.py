"""Search, saved-search and trend operations."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from twittersocial.models import (
    SavedSearch,
    SearchResults,
    Trends,
    parse_model,
    parse_model_list,
)
from twittersocial.paging import build_paging_params

if TYPE_CHECKING:
    from twittersocial.client import TwitterClient

_DEFAULT_RESULTS_PER_PAGE = 50


def _trend_params(exclude_hashtags: bool, start_date: date | str | None = None) -> dict[str, str]:
    params: dict[str, str] = {}
    if exclude_hashtags:
        params["exclude"] = "hashtags"
    if start_date is not None:
        params["date"] = (
            start_date.strftime("%Y-%m-%d") if isinstance(start_date, date) else start_date
        )
    return params


class SearchOperations:
    def __init__(self, client: TwitterClient) -> None:
        self._client = client

    # ── search ─────────────────────────────────────────────────────────────

    async def search(
        self,
        query: str,
        page: int = 1,
        page_size: int = _DEFAULT_RESULTS_PER_PAGE,
        since_id: int = 0,
        max_id: int = 0,
        geocode: str | None = None,
        result_type: str | None = None,
    ) -> SearchResults:
        """Search public tweets.

        *geocode* is ``"latitude,longitude,radius"`` (e.g. ``"37.78,-122.39,1mi"``),
        *result_type* one of ``mixed``, ``recent`` or ``popular``.
        """
        params: dict[str, Any] = {"q": query}
        params.update(
            build_paging_params(page, page_size, since_id, max_id, size_param="rpp")
        )
        if geocode:
            params["geocode"] = geocode
        if result_type:
            params["result_type"] = result_type
        payload = await self._client._request(
            "GET", self._client.settings.search_url, params=params
        )
        return SearchResults.from_payload(payload)

    # ── saved searches ─────────────────────────────────────────────────────

    async def get_saved_searches(self) -> list[SavedSearch]:
        payload = await self._client._request("GET", "saved_searches.json", authorized=True)
        return parse_model_list(SavedSearch, payload)

    async def get_saved_search(self, search_id: int) -> SavedSearch:
        payload = await self._client._request(
            "GET", f"saved_searches/show/{search_id}.json", authorized=True
        )
        return parse_model(SavedSearch, payload)

    async def create_saved_search(self, query: str) -> SavedSearch:
        payload = await self._client._request(
            "POST", "saved_searches/create.json", data={"query": query}, authorized=True
        )
        return parse_model(SavedSearch, payload)

    async def delete_saved_search(self, search_id: int) -> None:
        await self._client._request(
            "DELETE", f"saved_searches/destroy/{search_id}.json", authorized=True
        )

    # ── trends ─────────────────────────────────────────────────────────────

    async def get_daily_trends(
        self, exclude_hashtags: bool = False, start_date: date | str | None = None
    ) -> list[Trends]:
        """Top 20 topics for each hour of a 24-hour period, most recent hour first.

        Without *start_date* the period is the past 24 hours.
        """
        payload = await self._client._request(
            "GET", "trends/daily.json", params=_trend_params(exclude_hashtags, start_date)
        )
        return Trends.list_from_period_payload(payload)

    async def get_weekly_trends(
        self, exclude_hashtags: bool = False, start_date: date | str | None = None
    ) -> list[Trends]:
        """Top 30 topics for each day of a week, most recent day first."""
        payload = await self._client._request(
            "GET", "trends/weekly.json", params=_trend_params(exclude_hashtags, start_date)
        )
        return Trends.list_from_period_payload(payload)

    async def get_local_trends(self, woeid: int, exclude_hashtags: bool = False) -> Trends:
        """Top 10 topics for a location identified by its Where On Earth ID."""
        payload = await self._client._request(
            "GET", f"trends/{woeid}.json", params=_trend_params(exclude_hashtags)
        )
        return Trends.from_local_payload(payload)
