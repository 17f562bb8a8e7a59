"""Enums and response types for the MediaWiki REST API.

Pydantic models representing the structure of data returned by the REST
API. Models ignore unknown keys and default optional fields, so that
responses from different MediaWiki versions validate leniently.

Enums carry the exact lower-case tokens the API expects in paths and query
strings; ``str()`` of a member returns its token.
"""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WireEnum(str, enum.Enum):
    def __str__(self) -> str:
        return self.value


class HtmlFlavor(_WireEnum):
    """Flavor of HTML returned by the ``html`` and ``with_html`` endpoints."""

    VIEW = "view"
    STASH = "stash"
    FRAGMENT = "fragment"
    EDIT = "edit"


class HistoryFilter(_WireEnum):
    """Revision filter for the page history endpoint."""

    ANONYMOUS = "anonymous"
    BOT = "bot"
    REVERTED = "reverted"
    MINOR = "minor"


class HistoryFilterExtended(_WireEnum):
    """Count type for the page history counts endpoint."""

    ANONYMOUS = "anonymous"
    TEMPORARY = "temporary"
    BOT = "bot"
    EDITORS = "editors"
    EDITS = "edits"
    MINOR = "minor"
    REVERTED = "reverted"
    ANON_EDITS = "anonedits"
    BOT_EDITS = "botedits"
    REVERTED_EDITS = "revertededits"


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LicenseModel(_Model):
    """Content license of a page or revision."""

    url: str = ""
    title: str = ""


class RevisionTimestamp(_Model):
    """Identifier and timestamp of a page's latest revision."""

    id: int
    timestamp: str = ""


class PageInfo(_Model):
    """Basic page information shared by the page endpoints."""

    # Core identification
    id: int
    key: str = ""
    title: str = ""

    latest: RevisionTimestamp | None = None
    content_model: str = ""
    license: LicenseModel | None = None


class LanguageLink(_Model):
    """Link to the same page on a wiki in another language."""

    code: str
    name: str = ""
    key: str = ""
    title: str = ""


class UserInfo(_Model):
    """User reference; ``id`` is None for anonymous editors."""

    id: int | None = None
    name: str | None = None


class FileRevision(_Model):
    timestamp: str = ""
    user: UserInfo | None = None


class MediaType(_Model):
    """One rendition of a file (preferred, original or thumbnail)."""

    mediatype: str = ""
    size: int | None = None
    width: int | None = None
    height: int | None = None
    duration: float | None = None
    url: str = ""


class FileInfo(_Model):
    """File description returned by the file and media links endpoints."""

    title: str
    file_description_url: str = ""
    latest: FileRevision | None = None
    preferred: MediaType | None = None
    original: MediaType | None = None
    thumbnail: MediaType | None = None


class MediaResult(_Model):
    files: list[FileInfo] = Field(default_factory=list)


class TemplateInfo(_Model):
    name: str | None = None
    multi_part_template_block: bool = Field(False, alias="multiPartTemplateBlock")


class Lint(_Model):
    """Lint error reported for a page, revision or wikitext fragment.

    ``dsr`` holds the source range (start, end, open width, close width).
    """

    type_name: str = Field(alias="type")
    dsr: list[int | None] = Field(default_factory=list)
    params: dict[str, Any] = Field(default_factory=dict)
    template_info: TemplateInfo | None = Field(None, alias="templateInfo")


class HistoryRevision(_Model):
    id: int
    timestamp: str = ""
    minor: bool = False
    size: int = 0
    comment: str | None = None
    user: UserInfo | None = None
    delta: int | None = None


class History(_Model):
    """One segment of a page's revision history.

    ``older`` and ``newer`` are API URLs of the adjacent segments, when any.
    """

    revisions: list[HistoryRevision] = Field(default_factory=list)
    latest: str = ""
    older: str | None = None
    newer: str | None = None


class HistoryCounts(_Model):
    """Count of edits or editors; ``limit`` is True when the count was capped."""

    count: int
    limit: bool = False


class RevisionPage(_Model):
    id: int
    key: str = ""
    title: str = ""


class RevisionInfo(_Model):
    """Revision metadata shared by the revision endpoints."""

    # Core identification
    id: int
    page: RevisionPage | None = None

    # Revision details
    size: int = 0
    minor: bool = False
    timestamp: str = ""
    content_model: str = ""
    license: LicenseModel | None = None
    user: UserInfo | None = None
    comment: str | None = None
    delta: int | None = None


class DiffSection(_Model):
    level: int = 0
    heading: str = ""
    offset: int = 0


class DiffSide(_Model):
    """One side of a revision comparison."""

    id: int
    slot_role: str = ""
    sections: list[DiffSection] = Field(default_factory=list)


class DiffLine(_Model):
    """A single line of a visual diff; ``type`` is the numeric diff line type."""

    type: int
    line_number: int | None = Field(None, alias="lineNumber")
    text: str = ""
    offset: dict[str, int | None] = Field(default_factory=dict)
    highlight_ranges: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="highlightRanges",
    )
    move_info: dict[str, Any] | None = Field(None, alias="moveInfo")


class Diff(_Model):
    """Comparison between two revisions."""

    from_: DiffSide = Field(alias="from")
    to: DiffSide
    diff: list[DiffLine] = Field(default_factory=list)


class SearchThumbnail(_Model):
    mimetype: str = ""
    size: int | None = None
    width: int | None = None
    height: int | None = None
    duration: float | None = None
    url: str = ""


class SearchPage(_Model):
    id: int
    key: str = ""
    title: str = ""
    excerpt: str | None = None
    matched_title: str | None = None
    description: str | None = None
    thumbnail: SearchThumbnail | None = None


class SearchResults(_Model):
    pages: list[SearchPage] = Field(default_factory=list)


class PopupInfo(_Model):
    """Math popup content for a Wikidata item."""

    title: str
    contentmodel: str = ""
    pagelanguage: str = ""
    pagelanguagedir: str = ""
    extract: str = ""
    canonicalurl: str = ""
