import re
from app.domain.exceptions import ValidationError

SLUG_RE = re.compile(r"^[a-z0-9-]+$")
DOCUMENT_STATUSES = ("draft", "published", "archived")


def assert_slug(slug):
    if not slug or not isinstance(slug, str) or not SLUG_RE.match(slug):
        raise ValidationError(
            "Slug must contain only lowercase letters, numbers, and hyphens"
        )


def assert_title(title):
    if not title or not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")


def assert_status(status):
    if status not in DOCUMENT_STATUSES:
        raise ValidationError(
            f"Invalid status '{status}'. Expected one of: {', '.join(DOCUMENT_STATUSES)}"
        )
