"""Tests for the Page accessor against the mock wiki."""

import asyncio

import pytest
from conftest import LINTS, PAGE_INFO

from mediawiki_rest_api import (
    AccessTokenRequiredError,
    HistoryFilter,
    HistoryFilterExtended,
    HtmlFlavor,
    MissingResultsError,
    Page,
    TransportError,
)

TITLE = "Rust (programming language)"
PAGE_PATH = f"/w/rest.php/v1/page/{TITLE}"


@pytest.fixture
def page() -> Page:
    return Page(TITLE)


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


def test_get_returns_info_and_wikitext(api, wiki, page):
    wiki.add("GET", PAGE_PATH, json={**PAGE_INFO, "source": "Mozilla sponsorship"})

    info, wikitext = asyncio.run(page.get(api))

    assert info.id == 29414838  # noqa: PLR2004
    assert info.title == TITLE
    assert wikitext == "Mozilla sponsorship"
    assert not wiki.last_request.url.params


def test_get_encodes_title(api, wiki, page):
    wiki.add("GET", PAGE_PATH, json={**PAGE_INFO, "source": ""})
    asyncio.run(page.get(api))
    assert wiki.last_request.url.raw_path == (
        b"/w/rest.php/v1/page/Rust%20%28programming%20language%29"
    )


def test_get_sends_redirect(api, wiki, page):
    wiki.add("GET", PAGE_PATH, json={**PAGE_INFO, "source": ""})
    asyncio.run(page.get(api, redirect=False))
    assert wiki.last_request.url.params["redirect"] == "false"


def test_get_without_source(api, wiki, page):
    wiki.add("GET", PAGE_PATH, json=PAGE_INFO)
    with pytest.raises(MissingResultsError):
        asyncio.run(page.get(api))


def test_get_missing_page(api, wiki):
    with pytest.raises(TransportError):
        asyncio.run(Page("Does not exist").get(api))


def test_get_bare(api, wiki, page):
    html_url = (
        "https://en.wikipedia.org/w/rest.php/v1/page/"
        "Rust%20%28programming%20language%29/html"
    )
    wiki.add("GET", f"{PAGE_PATH}/bare", json={**PAGE_INFO, "html_url": html_url})

    info, url = asyncio.run(page.get_bare(api, redirect=True))

    assert info.id == 29414838  # noqa: PLR2004
    assert url == html_url
    assert wiki.last_request.url.params["redirect"] == "true"


def test_get_html(api, wiki, page):
    html = "<html><head><title>Rust (programming language)</title></head></html>"
    wiki.add("GET", f"{PAGE_PATH}/html", text=html)

    result = asyncio.run(
        page.get_html(api, redirect=False, stash=False, flavor=HtmlFlavor.VIEW),
    )

    assert result == html
    request = wiki.last_request
    assert request.headers["Accept"] == "text/html"
    assert dict(request.url.params) == {
        "redirect": "false",
        "stash": "false",
        "flavor": "view",
    }


def test_get_with_html(api, wiki, page):
    wiki.add(
        "GET",
        f"{PAGE_PATH}/with_html",
        json={**PAGE_INFO, "html": "<title>Rust (programming language)</title>"},
    )

    info, html = asyncio.run(page.get_with_html(api, flavor=HtmlFlavor.FRAGMENT))

    assert info.key == "Rust_(programming_language)"
    assert "<title>Rust (programming language)</title>" in html
    assert dict(wiki.last_request.url.params) == {"flavor": "fragment"}


def test_get_with_html_null_html(api, wiki, page):
    wiki.add("GET", f"{PAGE_PATH}/with_html", json={**PAGE_INFO, "html": None})
    with pytest.raises(MissingResultsError):
        asyncio.run(page.get_with_html(api))


# ---------------------------------------------------------------------------
# Links and lint
# ---------------------------------------------------------------------------


def test_get_links_language(api, wiki, page):
    wiki.add(
        "GET",
        f"{PAGE_PATH}/links/language",
        json=[
            {
                "code": "it",
                "name": "italiano",
                "key": "Rust_(linguaggio_di_programmazione)",
                "title": "Rust (linguaggio di programmazione)",
            },
            {
                "code": "de",
                "name": "Deutsch",
                "key": "Rust_(Programmiersprache)",
                "title": "Rust (Programmiersprache)",
            },
        ],
    )

    links = asyncio.run(page.get_links_language(api))

    assert any(
        link.code == "it" and link.title == "Rust (linguaggio di programmazione)"
        for link in links
    )


def test_get_links_media(api, wiki):
    wiki.add(
        "GET",
        "/w/rest.php/v1/page/Cambridge/links/media",
        json={
            "files": [
                {
                    "title": "Flag of England.svg",
                    "file_description_url": (
                        "//commons.wikimedia.org/wiki/File:Flag_of_England.svg"
                    ),
                    "latest": {
                        "timestamp": "2020-01-01T00:00:00Z",
                        "user": {"id": 7, "name": "Uploader"},
                    },
                    "preferred": {
                        "mediatype": "DRAWING",
                        "size": None,
                        "width": 600,
                        "height": 360,
                        "duration": None,
                        "url": "//upload.wikimedia.org/flag.svg.png",
                    },
                    "original": {
                        "mediatype": "DRAWING",
                        "size": 166,
                        "width": 800,
                        "height": 480,
                        "duration": None,
                        "url": "//upload.wikimedia.org/flag.svg",
                    },
                },
            ],
        },
    )

    media = asyncio.run(Page("Cambridge").get_links_media(api))

    assert [f.title for f in media.files] == ["Flag of England.svg"]
    assert media.files[0].original.width == 800  # noqa: PLR2004
    assert media.files[0].latest.user.name == "Uploader"


def test_get_lint(api, wiki):
    wiki.add("GET", "/w/rest.php/v1/page/Cambridge/lint", json=LINTS)

    lints = asyncio.run(Page("Cambridge").get_lint(api))

    assert len(lints) == len(LINTS)
    assert any(
        lint.type_name == "duplicate-ids"
        and lint.template_info.name == "Template:Cite_book"
        for lint in lints
    )


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

HISTORY = {
    "revisions": [
        {
            "id": 1316925953 - i,
            "timestamp": "2025-10-08T12:00:00Z",
            "minor": i % 2 == 0,
            "size": 114334,
            "comment": "edit",
            "user": {"id": 42, "name": "Example"},
            "delta": 10,
        }
        for i in range(20)
    ],
    "latest": "https://en.wikipedia.org/w/rest.php/v1/page/Rust/history",
    "older": (
        "https://en.wikipedia.org/w/rest.php/v1/page/Rust/history"
        "?older_than=1316925934"
    ),
}


def test_get_history(api, wiki, page):
    wiki.add("GET", f"{PAGE_PATH}/history", json=HISTORY)

    history = asyncio.run(page.get_history(api))

    assert len(history.revisions) == 20  # noqa: PLR2004
    assert history.newer is None
    assert history.older.endswith("older_than=1316925934")
    assert not wiki.last_request.url.params


def test_get_history_params(api, wiki, page):
    wiki.add("GET", f"{PAGE_PATH}/history", json=HISTORY)

    asyncio.run(
        page.get_history(api, filter=HistoryFilter.BOT, older_than=100, newer_than=5),
    )

    assert dict(wiki.last_request.url.params) == {
        "filter": "bot",
        "older_than": "100",
        "newer_than": "5",
    }


def test_get_history_counts(api, wiki):
    wiki.add(
        "GET",
        "/w/rest.php/v1/page/Cambridge/history/counts/anonymous",
        json={"count": 1289, "limit": False},
    )

    counts = asyncio.run(
        Page("Cambridge").get_history_counts(api, HistoryFilterExtended.ANONYMOUS),
    )

    assert counts.count == 1289  # noqa: PLR2004
    assert counts.limit is False


def test_get_history_counts_range(api, wiki):
    wiki.add(
        "GET",
        "/w/rest.php/v1/page/Cambridge/history/counts/revertededits",
        json={"count": 3, "limit": False},
    )

    asyncio.run(
        Page("Cambridge").get_history_counts(
            api,
            HistoryFilterExtended.REVERTED_EDITS,
            from_=10,
            to=20,
        ),
    )

    assert dict(wiki.last_request.url.params) == {"from": "10", "to": "20"}


# ---------------------------------------------------------------------------
# Create and edit
# ---------------------------------------------------------------------------


def test_create_requires_token(api, wiki, page):
    with pytest.raises(AccessTokenRequiredError):
        asyncio.run(page.create(api, "text", "new page"))
    assert wiki.requests == []


def test_edit_requires_token(api, wiki, page):
    with pytest.raises(AccessTokenRequiredError):
        asyncio.run(page.edit(api, "text", "summary", latest=1))
    assert wiki.requests == []


def test_create(authed_api, wiki):
    wiki.add(
        "POST",
        "/w/rest.php/v1/page",
        201,
        json={**PAGE_INFO, "title": "Sandbox", "source": "Hello"},
    )

    info, source = asyncio.run(
        Page("Sandbox").create(
            authed_api,
            "Hello",
            "Creating",
            content_model="wikitext",
        ),
    )

    assert info.title == "Sandbox"
    assert source == "Hello"
    request = wiki.last_request
    assert request.method == "POST"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Content-Type"] == "application/json"
    assert wiki.last_json_body() == {
        "source": "Hello",
        "title": "Sandbox",
        "comment": "Creating",
        "token": "secret-token",
        "content_model": "wikitext",
    }


def test_edit(authed_api, wiki, page):
    wiki.add("PUT", PAGE_PATH, json={**PAGE_INFO, "source": "Updated"})

    info, source = asyncio.run(
        page.edit(authed_api, "Updated", "copyedit", latest=1316925953),
    )

    assert info.id == 29414838  # noqa: PLR2004
    assert source == "Updated"
    assert wiki.last_request.method == "PUT"
    assert wiki.last_json_body() == {
        "source": "Updated",
        "comment": "copyedit",
        "token": "secret-token",
        "latest": {"id": 1316925953},
    }


def test_edit_conflict(authed_api, wiki, page):
    wiki.add("PUT", PAGE_PATH, 409, json={"httpCode": 409, "errorKey": "conflict"})
    with pytest.raises(TransportError):
        asyncio.run(page.edit(authed_api, "Updated", "copyedit", latest=1))
