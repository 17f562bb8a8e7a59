"""Wikitext and HTML transformations.

Converts wikitext to HTML, HTML back to wikitext, and lints wikitext
without saving anything. Passing a page title renders the content as if
it were on that page (e.g. for ``{{FULLPAGENAME}}``).
"""

from ..decoding import decode
from ..session import RestApi
from ..types import Lint
from ._common import encode_title


def _path(source: str, target: str, title: str | None) -> str:
    path = f"/transform/{source}/to/{target}"
    if title is not None:
        path = f"{path}/{encode_title(title)}"
    return path


async def wikitext_to_html(
    api: RestApi,
    wikitext: str,
    title: str | None = None,
) -> str:
    """Render wikitext to HTML.

    Args:
        api: Session to use.
        wikitext: Wikitext to render.
        title: Optional title of the page providing the rendering context.

    Returns:
        The rendered HTML document.
    """
    return await api.fetch_text(
        _path("wikitext", "html", title),
        method="POST",
        json={"wikitext": wikitext},
        accept="text/html",
    )


async def html_to_wikitext(
    api: RestApi,
    html: str,
    title: str | None = None,
) -> str:
    """Convert Parsoid HTML back to wikitext."""
    return await api.fetch_text(
        _path("html", "wikitext", title),
        method="POST",
        json={"html": html},
        accept="text/plain",
    )


async def wikitext_to_lint(
    api: RestApi,
    wikitext: str,
    title: str | None = None,
) -> list[Lint]:
    """Return the lint errors found in ``wikitext``."""
    data = await api.fetch_json(
        _path("wikitext", "lint", title),
        method="POST",
        json={"wikitext": wikitext},
        accept="",
    )
    return decode(list[Lint], data)
