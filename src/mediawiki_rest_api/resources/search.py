"""Full-text and title search."""

from ..decoding import decode
from ..session import RestApi
from ..types import SearchResults
from ._common import query_params


async def _search(
    api: RestApi,
    kind: str,
    query: str,
    limit: int | None,
) -> SearchResults:
    data = await api.fetch_json(
        f"/search/{kind}",
        query_params(q=query, limit=limit),
    )
    return decode(SearchResults, data)


async def page(api: RestApi, query: str, limit: int | None = None) -> SearchResults:
    """Search page titles and contents.

    Args:
        api: Session to use.
        query: Search terms.
        limit: Maximum number of results (server default 50).
    """
    return await _search(api, "page", query, limit)


async def title(api: RestApi, query: str, limit: int | None = None) -> SearchResults:
    """Search page titles by prefix, for autocompletion."""
    return await _search(api, "title", query, limit)
