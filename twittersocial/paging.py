"""Pagination query-parameter encoding."""

from __future__ import annotations


def build_paging_params(
    page: int,
    page_size: int,
    since_id: int = 0,
    max_id: int = 0,
    *,
    size_param: str = "count",
) -> dict[str, int]:
    """Build the ``page``/``count`` (or ``rpp``) query parameters.

    ``since_id`` and ``max_id`` are only included when positive; zero means
    "no bound".  The Search API names its page size ``rpp``, pass it as
    *size_param*.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    params: dict[str, int] = {"page": page, size_param: page_size}
    if since_id > 0:
        params["since_id"] = since_id
    if max_id > 0:
        params["max_id"] = max_id
    return params
