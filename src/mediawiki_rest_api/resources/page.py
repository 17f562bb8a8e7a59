"""Page resource accessor.

Reads page content, HTML, links, lint errors and history, and creates or
edits pages. Editing requires an access token on the session.
"""

from dataclasses import dataclass

import structlog

from ..decoding import decode, extract_text
from ..session import RestApi
from ..types import (
    History,
    HistoryCounts,
    HistoryFilter,
    HistoryFilterExtended,
    HtmlFlavor,
    LanguageLink,
    Lint,
    MediaResult,
    PageInfo,
)
from ._common import encode_title, query_params

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Page:
    """A wiki page, identified by its title."""

    title: str

    @property
    def path(self) -> str:
        return f"/page/{encode_title(self.title)}"

    async def get(
        self,
        api: RestApi,
        redirect: bool | None = None,
    ) -> tuple[PageInfo, str]:
        """Fetch page information and the latest wikitext.

        Args:
            api: Session to use.
            redirect: Whether the server should follow redirects.

        Returns:
            Tuple of (page info, wikitext source).

        Raises:
            TransportError: If the request fails.
            MissingResultsError: If the response has no ``source``.
            DecodeError: If the page information does not validate.
        """
        data = await api.fetch_json(self.path, query_params(redirect=redirect))
        source = extract_text(data, "source")
        return decode(PageInfo, data), source

    async def get_bare(
        self,
        api: RestApi,
        redirect: bool | None = None,
    ) -> tuple[PageInfo, str]:
        """Fetch page information and the URL of the page HTML."""
        data = await api.fetch_json(
            f"{self.path}/bare",
            query_params(redirect=redirect),
        )
        html_url = extract_text(data, "html_url")
        return decode(PageInfo, data), html_url

    async def get_html(
        self,
        api: RestApi,
        redirect: bool | None = None,
        stash: bool | None = None,
        flavor: HtmlFlavor | None = None,
    ) -> str:
        """Fetch the rendered HTML of the page."""
        return await api.fetch_text(
            f"{self.path}/html",
            query_params(redirect=redirect, stash=stash, flavor=flavor),
            accept="text/html",
        )

    async def get_with_html(
        self,
        api: RestApi,
        redirect: bool | None = None,
        stash: bool | None = None,
        flavor: HtmlFlavor | None = None,
    ) -> tuple[PageInfo, str]:
        """Fetch page information together with the rendered HTML."""
        data = await api.fetch_json(
            f"{self.path}/with_html",
            query_params(redirect=redirect, stash=stash, flavor=flavor),
        )
        html = extract_text(data, "html")
        return decode(PageInfo, data), html

    async def get_links_language(self, api: RestApi) -> list[LanguageLink]:
        """Fetch links to this page on wikis in other languages."""
        data = await api.fetch_json(f"{self.path}/links/language")
        return decode(list[LanguageLink], data)

    async def get_links_media(self, api: RestApi) -> MediaResult:
        """Fetch the media files used on the page."""
        data = await api.fetch_json(f"{self.path}/links/media")
        return decode(MediaResult, data)

    async def get_lint(
        self,
        api: RestApi,
        redirect: bool | None = None,
    ) -> list[Lint]:
        data = await api.fetch_json(
            f"{self.path}/lint",
            query_params(redirect=redirect),
        )
        return decode(list[Lint], data)

    async def get_history(
        self,
        api: RestApi,
        filter: HistoryFilter | None = None,  # noqa: A002
        older_than: int | None = None,
        newer_than: int | None = None,
    ) -> History:
        """Fetch one segment (up to 20 revisions) of the page history.

        Args:
            api: Session to use.
            filter: Only include revisions of this kind.
            older_than: Only include revisions older than this revision ID.
            newer_than: Only include revisions newer than this revision ID.
        """
        data = await api.fetch_json(
            f"{self.path}/history",
            query_params(
                older_than=older_than,
                newer_than=newer_than,
                filter=filter,
            ),
        )
        return decode(History, data)

    async def get_history_counts(
        self,
        api: RestApi,
        filter: HistoryFilterExtended,  # noqa: A002
        from_: int | None = None,
        to: int | None = None,
    ) -> HistoryCounts:
        """Count edits or editors of the page.

        Args:
            api: Session to use.
            filter: What to count.
            from_: Count from this revision ID (edits filters only).
            to: Count up to this revision ID (edits filters only).
        """
        params = query_params(to=to)
        if from_ is not None:
            params["from"] = str(from_)
        data = await api.fetch_json(
            f"{self.path}/history/counts/{filter!s}",
            params,
        )
        return decode(HistoryCounts, data)

    async def create(
        self,
        api: RestApi,
        source: str,
        comment: str,
        content_model: str | None = None,
    ) -> tuple[PageInfo, str]:
        """Create the page with the given wikitext.

        Returns:
            Tuple of (page info, wikitext source) of the created page.

        Raises:
            AccessTokenRequiredError: If the session holds no access token.
                No request is made in that case.
        """
        token = api.require_edit_token()
        body = {
            "source": source,
            "title": self.title,
            "comment": comment,
            "token": token,
        }
        if content_model is not None:
            body["content_model"] = content_model
        logger.info("Creating page", title=self.title)
        data = await api.fetch_json("/page", method="POST", json=body)
        return decode(PageInfo, data), extract_text(data, "source")

    async def edit(
        self,
        api: RestApi,
        source: str,
        comment: str,
        latest: int,
        content_model: str | None = None,
    ) -> tuple[PageInfo, str]:
        """Replace the page wikitext.

        Args:
            api: Session to use.
            source: New wikitext.
            comment: Edit summary.
            latest: ID of the revision the edit is based on; the server
                rejects the edit if the page changed since.
            content_model: Optional content model of the new content.

        Returns:
            Tuple of (page info, wikitext source) after the edit.

        Raises:
            AccessTokenRequiredError: If the session holds no access token.
                No request is made in that case.
        """
        token = api.require_edit_token()
        body = {
            "source": source,
            "comment": comment,
            "token": token,
            "latest": {"id": latest},
        }
        if content_model is not None:
            body["content_model"] = content_model
        logger.info("Editing page", title=self.title, latest=latest)
        data = await api.fetch_json(self.path, method="PUT", json=body)
        return decode(PageInfo, data), extract_text(data, "source")
