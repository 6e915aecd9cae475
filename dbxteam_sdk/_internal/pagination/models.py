"""Base model for cursor-paginated list results."""

from typing import Any, ClassVar

from dbxteam_sdk._internal.dispatch.models import WireModel


class ListPage(WireModel):
    """One page of a listing.

    Subclasses declare their item list under the field the API uses and
    name it in ``items_field``. The cursor is opaque: store it and forward
    it verbatim to the continuation route.
    """

    items_field: ClassVar[str] = "items"

    cursor: str | None = None
    has_more: bool = False

    @property
    def items(self) -> list[Any]:
        return list(getattr(self, self.items_field))
