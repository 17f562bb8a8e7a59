"""Tests for page and title search."""

import asyncio

from mediawiki_rest_api import search

RESULTS = {
    "pages": [
        {
            "id": 29414838,
            "key": "Rust_(programming_language)",
            "title": "Rust (programming language)",
            "excerpt": "<span class=\"searchmatch\">Rust</span> is a language",
            "matched_title": None,
            "description": "General-purpose programming language",
            "thumbnail": {
                "mimetype": "image/png",
                "width": 60,
                "height": 60,
                "duration": None,
                "url": "//upload.wikimedia.org/rust.png",
            },
        },
        {"id": 1, "key": "Rust", "title": "Rust", "thumbnail": None},
    ],
}


def test_page_search(api, wiki):
    wiki.add("GET", "/w/rest.php/v1/search/page", json=RESULTS)

    results = asyncio.run(search.page(api, "rust language", limit=2))

    assert [p.title for p in results.pages] == ["Rust (programming language)", "Rust"]
    assert results.pages[0].thumbnail.width == 60  # noqa: PLR2004
    assert results.pages[1].thumbnail is None
    assert dict(wiki.last_request.url.params) == {"q": "rust language", "limit": "2"}


def test_title_search_without_limit(api, wiki):
    wiki.add("GET", "/w/rest.php/v1/search/title", json={"pages": []})

    results = asyncio.run(search.title(api, "Rus"))

    assert results.pages == []
    assert dict(wiki.last_request.url.params) == {"q": "Rus"}
