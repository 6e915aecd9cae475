"""Cursor pagination protocol."""

from dbxteam_sdk._internal.pagination.iterator import iter_items, iter_pages
from dbxteam_sdk._internal.pagination.models import ListPage

__all__ = ["ListPage", "iter_pages", "iter_items"]
