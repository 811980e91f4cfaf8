"""
Page-token loop shared by every list sample.

    pages = iter_pages(content.products().list, "resources", merchantId=123)
    print_paged_list(pages, lambda p: print(f"- {p['id']}"), "No products found.")

A list method is re-issued with pageToken=<nextPageToken> until a response
arrives without a token. An absent or empty collection ends the loop.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def iter_pages(
    list_method: Callable[..., Any],
    key: str = "resources",
    **params: Any,
) -> Iterator[list[dict]]:
    """
    Yield the item list of each page returned by a googleapiclient list method.

    Args:
        list_method: Bound collection method, e.g. content.products().list
        key:         Response field holding the items ("resources" for most
                     Content API collections).
        params:      Request parameters for the first page.

    An empty page is yielded once and then iteration stops.
    """
    page_number = 0
    while True:
        page_number += 1
        response = list_method(**params).execute()
        items = response.get(key) or []
        logger.debug("Page %d: %d item(s)", page_number, len(items))
        yield items
        if not items:
            return

        token = response.get("nextPageToken")
        if not token:
            return
        params = {**params, "pageToken": token}


def map_pages(
    pages: Iterator[list[dict]], parse: Callable[[dict], T]
) -> Iterator[list[T]]:
    """Apply a parser to every item of every page."""
    for page in pages:
        yield [parse(raw) for raw in page]


def print_paged_list(
    pages: Iterator[list[T]],
    render: Callable[[T], None],
    empty_message: str,
) -> int:
    """
    Render each item of each page; print empty_message once if a page is empty.

    Returns the number of items rendered.
    """
    count = 0
    for page in pages:
        if not page:
            print(empty_message)
            break
        for item in page:
            render(item)
            count += 1
    return count
