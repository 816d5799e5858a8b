# app/normalizers/pagination.py
from typing import Callable, Any, Dict


def normalize_pagination(
    pagination,
    normalize_fn: Callable[[Any], Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Normalize a Flask-SQLAlchemy Pagination into the list envelope used by
    every list endpoint.
    """
    per_page = pagination.per_page
    total = pagination.total

    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in pagination.items],
        "pagination": {
            "page": pagination.page,
            "per_page": per_page,
        },
    }

    if total is not None:
        response["pagination"]["total"] = total
        response["pagination"]["total_pages"] = (
            (total + per_page - 1) // per_page if per_page else 0
        )

    return response
