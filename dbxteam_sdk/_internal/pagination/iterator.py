"""Cursor continuation over list/continue routes."""

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from dbxteam_sdk._internal.pagination.models import ListPage
from dbxteam_sdk.exceptions import DbxTeamProtocolError

P = TypeVar("P", bound=ListPage)


def iter_pages(first: Callable[[], P], follow: Callable[[str], P]) -> Iterator[P]:
    """Yield every page of a listing, in server order.

    Args:
        first: Fetches the first page.
        follow: Fetches the page after the given cursor.

    Pages are fetched lazily. ``follow`` always receives the cursor of the
    most recent page and is never called once a page reports no more results.
    """
    page = first()
    yield page
    while page.has_more:
        if not page.cursor:
            raise DbxTeamProtocolError("Page reports has_more without a cursor")
        page = follow(page.cursor)
        yield page


def iter_items(first: Callable[[], P], follow: Callable[[str], P]) -> Iterator[Any]:
    """Yield the items of every page, in order."""
    for page in iter_pages(first, follow):
        yield from page.items
