"""Domain models mapped from Twitter JSON payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, ValidationError

from twittersocial.errors import ResponseParseError

# REST, Search, ISO-8601, hourly trend key, daily trend key
_DATE_FORMATS = (
    "%a %b %d %H:%M:%S %z %Y",
    "%a, %d %b %Y %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)


def parse_twitter_datetime(value: Any) -> datetime | None:
    """Parse any of the date formats the Twitter APIs emit.

    Naive results are assumed to be UTC.  Integers are treated as epoch
    seconds.
    """
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
            except ValueError:
                continue
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
    raise ValueError(f"unrecognised Twitter date: {value!r}")


TwitterDateTime = Annotated[datetime | None, BeforeValidator(parse_twitter_datetime)]


class _TwitterModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class TwitterProfile(_TwitterModel):
    id: int
    screen_name: str
    name: str | None = None
    url: str | None = None
    profile_image_url: str | None = None
    description: str | None = None
    location: str | None = None
    created_at: TwitterDateTime = None


class DirectMessage(_TwitterModel):
    id: int
    text: str
    sender: TwitterProfile
    recipient: TwitterProfile
    created_at: TwitterDateTime = None


class Tweet(_TwitterModel):
    """A single result from the Search API."""

    id: int
    text: str
    created_at: TwitterDateTime = None
    from_user: str | None = None
    from_user_id: int | None = None
    to_user_id: int | None = None
    profile_image_url: str | None = None
    source: str | None = None
    language_code: str | None = Field(default=None, alias="iso_language_code")


class SearchResults(_TwitterModel):
    tweets: list[Tweet]
    max_id: int = 0
    since_id: int = 0
    last_page: bool = True

    @classmethod
    def from_payload(cls, payload: Any) -> SearchResults:
        """Build from a ``search.json`` body.

        ``last_page`` is true when Twitter did not hand back a ``next_page``
        link.
        """
        if not isinstance(payload, dict):
            raise ResponseParseError(f"expected search object, got {type(payload).__name__}")
        return parse_model(
            cls,
            {
                "tweets": payload.get("results") or [],
                "max_id": payload.get("max_id") or 0,
                "since_id": payload.get("since_id") or 0,
                "last_page": not payload.get("next_page"),
            },
        )


class SavedSearch(_TwitterModel):
    id: int
    query: str
    name: str | None = None
    position: int | None = None
    created_at: TwitterDateTime = None


class Trend(_TwitterModel):
    name: str
    query: str | None = None


class Trends(_TwitterModel):
    time: Annotated[datetime, BeforeValidator(parse_twitter_datetime)]
    trends: list[Trend]

    @classmethod
    def list_from_period_payload(cls, payload: Any) -> list[Trends]:
        """Build from a daily/weekly trends body, most recent period first.

        The body keys each period by its start (``2011-01-14 00:00`` for
        hourly buckets, ``2011-01-14`` for daily ones).
        """
        periods = payload.get("trends") if isinstance(payload, dict) else None
        if not isinstance(periods, dict):
            raise ResponseParseError("trends payload has no 'trends' object")
        result = [
            parse_model(cls, {"time": key, "trends": trends})
            for key, trends in periods.items()
        ]
        result.sort(key=lambda t: t.time, reverse=True)
        return result

    @classmethod
    def from_local_payload(cls, payload: Any) -> Trends:
        """Build from a ``trends/{woeid}.json`` body (a one-element list)."""
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
            raise ResponseParseError("local trends payload is not a non-empty list")
        entry = payload[0]
        return parse_model(cls, {"time": entry.get("as_of"), "trends": entry.get("trends") or []})


M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], payload: Any) -> M:
    """Validate *payload* into *model*, raising :class:`ResponseParseError`."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ResponseParseError(f"cannot map payload onto {model.__name__}: {exc}") from exc


def parse_model_list(model: type[M], payload: Any) -> list[M]:
    try:
        return TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise ResponseParseError(f"cannot map payload onto list[{model.__name__}]: {exc}") from exc
