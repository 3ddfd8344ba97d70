"""Pagination: query parameters in, X-Total-Count and Link headers out."""

from src.api.models import GameRatingPage
from src.core.exceptions import InvalidRequestError
from src.core.models import PageRequest, SortOrder
from src.core.shared_types import SORTABLE_FIELDS, SortDirection


def parse_sort(sort_params: list[str] | None) -> list[SortOrder]:
    """
    Interpret ?sort=field,direction query values (repeatable, direction optional and ascending by default).

    e.g. ["score,desc", "rated_at"] -> [("score", DESC), ("rated_at", ASC)]
    """
    orders: list[SortOrder] = []
    for param in sort_params or []:
        field_name, _, direction = param.partition(",")
        field_name = field_name.strip()
        direction = direction.strip().lower() or SortDirection.ASC
        if not field_name:
            raise InvalidRequestError(
                f"Cannot interpret sort: {param!r}.", error_key="sortinvalid"
            )
        if field_name not in SORTABLE_FIELDS:
            raise InvalidRequestError(
                f"Cannot sort game ratings by {field_name!r}.", error_key="sortinvalid"
            )
        try:
            orders.append((field_name, SortDirection(direction)))
        except ValueError as exc:
            raise InvalidRequestError(
                f"Sort direction must be 'asc' or 'desc', got {direction!r}.",
                error_key="sortinvalid",
            ) from exc
    return orders


def build_page_request(page: int, size: int, sort: list[str] | None) -> PageRequest:
    return PageRequest(page=page, size=size, sort=parse_sort(sort))


def generate_pagination_headers(page: GameRatingPage, base_url: str) -> dict[str, str]:
    """Total count plus links to the next / previous / last / first page."""

    def _link(page_number: int, rel: str) -> str:
        return f'<{base_url}?page={page_number}&size={page.size}>; rel="{rel}"'

    links = []
    if page.has_next:
        links.append(_link(page.page + 1, "next"))
    if page.has_previous:
        links.append(_link(page.page - 1, "prev"))
    links.append(_link(max(page.total_pages - 1, 0), "last"))
    links.append(_link(0, "first"))

    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
