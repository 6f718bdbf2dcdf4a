"""Page-based pagination shared by every listing endpoint."""

from typing import Any, Callable, Optional

from django.conf import settings
from django.core.paginator import EmptyPage, Paginator


def parse_page_params(query_params, default_page_size: Optional[int] = None) -> tuple:
    """Read ``page`` and ``pageSize`` (or ``page_size``) from query params, tolerating junk."""
    default_page_size = default_page_size or settings.DEFAULT_PAGE_SIZE
    try:
        page = int(query_params.get("page", 1))
    except (TypeError, ValueError):
        page = 1
    raw_size = query_params.get("pageSize", query_params.get("page_size", default_page_size))
    try:
        page_size = int(raw_size)
    except (TypeError, ValueError):
        page_size = default_page_size
    return page, page_size


def paginate(
    queryset,
    page: int = 1,
    page_size: Optional[int] = None,
    serialize: Optional[Callable[[Any], Any]] = None,
) -> dict:
    """
    Paginate a queryset into the API's page envelope.

    Returns:
        {
            "items": [...],
            "totalItems": int,
            "totalPages": int,
            "currentPage": int,
            "hasNextPage": bool,
            "hasPreviousPage": bool,
        }

    ``page`` below 1 is treated as 1; ``page_size`` is clamped to
    ``settings.MAX_PAGE_SIZE``. A page past the end returns no items.
    """
    page_size = page_size or settings.DEFAULT_PAGE_SIZE
    page_size = max(1, min(page_size, settings.MAX_PAGE_SIZE))
    page = max(1, page)

    paginator = Paginator(queryset, page_size)
    total_items = paginator.count
    total_pages = (total_items + page_size - 1) // page_size

    try:
        items = list(paginator.page(page).object_list)
    except EmptyPage:
        items = []

    if serialize is not None:
        items = serialize(items)

    return {
        "items": items,
        "totalItems": total_items,
        "totalPages": total_pages,
        "currentPage": page,
        "hasNextPage": page < total_pages,
        "hasPreviousPage": page > 1,
    }


def serialize_page(page: dict, serializer_class, **kwargs) -> dict:
    """Serialize the ``items`` of a page envelope with ``serializer_class(many=True)``."""
    return {**page, "items": serializer_class(page["items"], many=True, **kwargs).data}
