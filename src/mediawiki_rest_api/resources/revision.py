"""Revision resource accessor."""

from dataclasses import dataclass

from ..decoding import decode, extract_text
from ..session import RestApi
from ..types import Diff, HtmlFlavor, Lint, RevisionInfo
from ._common import query_params


@dataclass(frozen=True)
class Revision:
    """A single page revision, identified by its revision ID."""

    id: int

    @property
    def path(self) -> str:
        return f"/revision/{self.id}"

    async def get(self, api: RestApi) -> tuple[RevisionInfo, str]:
        """Fetch revision information and its wikitext.

        Returns:
            Tuple of (revision info, wikitext source).

        Raises:
            TransportError: If the request fails.
            MissingResultsError: If the response has no ``source``.
            DecodeError: If the revision information does not validate.
        """
        data = await api.fetch_json(self.path)
        source = extract_text(data, "source")
        return decode(RevisionInfo, data), source

    async def get_bare(self, api: RestApi) -> tuple[RevisionInfo, str]:
        """Fetch revision information and the URL of the revision HTML."""
        data = await api.fetch_json(f"{self.path}/bare")
        html_url = extract_text(data, "html_url")
        return decode(RevisionInfo, data), html_url

    async def get_html(
        self,
        api: RestApi,
        stash: bool | None = None,
        flavor: HtmlFlavor | None = None,
    ) -> str:
        return await api.fetch_text(
            f"{self.path}/html",
            query_params(stash=stash, flavor=flavor),
            accept="text/html",
        )

    async def get_with_html(
        self,
        api: RestApi,
        stash: bool | None = None,
        flavor: HtmlFlavor | None = None,
    ) -> tuple[RevisionInfo, str]:
        data = await api.fetch_json(
            f"{self.path}/with_html",
            query_params(stash=stash, flavor=flavor),
        )
        html = extract_text(data, "html")
        return decode(RevisionInfo, data), html

    async def get_lint(self, api: RestApi) -> list[Lint]:
        data = await api.fetch_json(f"{self.path}/lint")
        return decode(list[Lint], data)

    async def get_compare(self, api: RestApi, other_id: int) -> Diff:
        """Compare this revision with revision ``other_id``."""
        data = await api.fetch_json(f"{self.path}/compare/{other_id}")
        return decode(Diff, data)
