from typing import Set
from app.domain.exceptions import InvariantViolation

# Explicit allowed state transitions
ALLOWED_DOCUMENT_TRANSITIONS: dict[str, Set[str]] = {
    "draft": {"published", "archived"},
    "published": {"draft", "archived"},
    "archived": {"draft"},
}

def assert_document_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards newsletter and blog post lifecycle transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_DOCUMENT_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvariantViolation(
            f"Illegal status transition: {from_status} → {to_status}"
        )
