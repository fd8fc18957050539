"""CLI entry point: twitter-social.

Subcommands:
    twitter-social search "#python" --page-size 20
    twitter-social trends daily --exclude-hashtags
    twitter-social trends local 2487956
    twitter-social saved-searches list
    twitter-social dm received --page 2
    twitter-social dm send habuma "Hello there!"

Credentials come from TWITTER_CONSUMER_KEY, TWITTER_CONSUMER_SECRET,
TWITTER_ACCESS_TOKEN and TWITTER_ACCESS_TOKEN_SECRET.
"""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
from pydantic import BaseModel

from twittersocial.client import TwitterClient
from twittersocial.core.config import TwitterSettings
from twittersocial.core.logging import setup_logging
from twittersocial.errors import TwitterApiError


def _build_client() -> TwitterClient:
    try:
        settings = TwitterSettings.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return TwitterClient.from_settings(settings)


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _run(call: Callable[[TwitterClient], Awaitable[Any]]) -> Any:
    """Run *call* against a fresh client, exiting with status 1 on API errors."""

    async def _go() -> Any:
        async with _build_client() as client:
            return await call(client)

    try:
        return asyncio.run(_go())
    except TwitterApiError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _emit(value: Any) -> None:
    click.echo(json.dumps(_jsonable(value), indent=2, ensure_ascii=False))


def paging_options(page_size: int) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Add --page, --page-size, --since-id and --max-id to a command."""

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        f = click.option(
            "--max-id",
            type=click.IntRange(min=0),
            default=0,
            help="Only results with an ID up to this",
        )(f)
        f = click.option(
            "--since-id",
            type=click.IntRange(min=0),
            default=0,
            help="Only results with an ID greater than this",
        )(f)
        f = click.option(
            "--page-size",
            type=click.IntRange(min=1),
            default=page_size,
            show_default=True,
            help="Results per page",
        )(f)
        return click.option(
            "--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number"
        )(f)

    return decorator


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Query Twitter direct messages, search, trends and saved searches."""
    setup_logging("DEBUG" if verbose else None)


# ── search ──


@main.command()
@click.argument("query")
@paging_options(page_size=50)
@click.option("--geocode", default=None, help="latitude,longitude,radius (e.g. 37.78,-122.39,1mi)")
@click.option(
    "--result-type",
    type=click.Choice(["mixed", "recent", "popular"]),
    default=None,
    help="Kind of results to prefer",
)
def search(
    query: str,
    page: int,
    page_size: int,
    since_id: int,
    max_id: int,
    geocode: str | None,
    result_type: str | None,
) -> None:
    """Search public tweets."""
    _emit(
        _run(
            lambda c: c.search.search(
                query,
                page=page,
                page_size=page_size,
                since_id=since_id,
                max_id=max_id,
                geocode=geocode,
                result_type=result_type,
            )
        )
    )


# ── trends ──


@main.group()
def trends() -> None:
    """Trending topics."""


@trends.command("daily")
@click.option("--exclude-hashtags", is_flag=True, help="Leave out hashtagged topics")
@click.option("--date", "start_date", default=None, help="Start date (YYYY-MM-DD)")
def trends_daily(exclude_hashtags: bool, start_date: str | None) -> None:
    """Hourly trends for a 24-hour period."""
    _emit(_run(lambda c: c.search.get_daily_trends(exclude_hashtags, start_date)))


@trends.command("weekly")
@click.option("--exclude-hashtags", is_flag=True, help="Leave out hashtagged topics")
@click.option("--date", "start_date", default=None, help="Start date (YYYY-MM-DD)")
def trends_weekly(exclude_hashtags: bool, start_date: str | None) -> None:
    """Daily trends for a week."""
    _emit(_run(lambda c: c.search.get_weekly_trends(exclude_hashtags, start_date)))


@trends.command("local")
@click.argument("woeid", type=int)
@click.option("--exclude-hashtags", is_flag=True, help="Leave out hashtagged topics")
def trends_local(woeid: int, exclude_hashtags: bool) -> None:
    """Trends for a Where On Earth ID."""
    _emit(_run(lambda c: c.search.get_local_trends(woeid, exclude_hashtags)))


# ── saved searches ──


@main.group("saved-searches")
def saved_searches() -> None:
    """Manage the authenticating user's saved searches."""


@saved_searches.command("list")
def saved_searches_list() -> None:
    _emit(_run(lambda c: c.search.get_saved_searches()))


@saved_searches.command("show")
@click.argument("search_id", type=int)
def saved_searches_show(search_id: int) -> None:
    _emit(_run(lambda c: c.search.get_saved_search(search_id)))


@saved_searches.command("create")
@click.argument("query")
def saved_searches_create(query: str) -> None:
    _emit(_run(lambda c: c.search.create_saved_search(query)))


@saved_searches.command("delete")
@click.argument("search_id", type=int)
def saved_searches_delete(search_id: int) -> None:
    _run(lambda c: c.search.delete_saved_search(search_id))
    click.echo(f"Deleted saved search {search_id}")


# ── direct messages ──


@main.group()
def dm() -> None:
    """Direct messages of the authenticating user."""


@dm.command("received")
@paging_options(page_size=20)
def dm_received(page: int, page_size: int, since_id: int, max_id: int) -> None:
    _emit(
        _run(
            lambda c: c.direct_messages.get_direct_messages_received(
                page, page_size, since_id, max_id
            )
        )
    )


@dm.command("sent")
@paging_options(page_size=20)
def dm_sent(page: int, page_size: int, since_id: int, max_id: int) -> None:
    _emit(
        _run(
            lambda c: c.direct_messages.get_direct_messages_sent(page, page_size, since_id, max_id)
        )
    )


@dm.command("show")
@click.argument("message_id", type=int)
def dm_show(message_id: int) -> None:
    _emit(_run(lambda c: c.direct_messages.get_direct_message(message_id)))


@dm.command("send")
@click.argument("recipient")
@click.argument("text")
@click.option("--by-id", is_flag=True, help="Treat RECIPIENT as a numeric user ID")
def dm_send(recipient: str, text: str, by_id: bool) -> None:
    """Send TEXT to RECIPIENT (screen name, or user ID with --by-id)."""
    if by_id:
        if not recipient.isdigit():
            click.echo(f"Error: --by-id expects a numeric user ID, got {recipient!r}", err=True)
            sys.exit(1)
        target: str | int = int(recipient)
    else:
        target = recipient
    _emit(_run(lambda c: c.direct_messages.send_direct_message(target, text)))


@dm.command("delete")
@click.argument("message_id", type=int)
def dm_delete(message_id: int) -> None:
    _run(lambda c: c.direct_messages.delete_direct_message(message_id))
    click.echo(f"Deleted direct message {message_id}")
