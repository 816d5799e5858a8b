from typing import Any, Dict
from flask import current_app
from app.domain.exceptions import ConflictError, ValidationError
from app.domain.invariants.document import assert_slug, assert_title
from app.utils.slug import generate_slug
from app.utils.transaction import transactional
from .lookup import load_document
from .create_document import EXTRA_FIELDS

ALLOWED_UPDATE_FIELDS = {"title", "slug"}


def update_document(
    *,
    kind: str,
    document_id: str,
    data: Dict[str, Any],
):
    """
    Update mutable fields on a newsletter or blog post.

    Design rules:
    - Only whitelisted fields are mutable; status goes through change_status
    - A title change regenerates the slug until the slug has been set by hand
    - No silent no-op updates
    """
    document = load_document(kind, document_id)
    allowed = ALLOWED_UPDATE_FIELDS | set(EXTRA_FIELDS[kind])

    if not allowed & set(data):
        raise ValidationError("No valid fields provided for update")

    if "title" in data:
        assert_title(data["title"])
    if "slug" in data:
        assert_slug(data["slug"])

    changed_fields: list[str] = []

    with transactional():
        if "title" in data and data["title"].strip() != document.title:
            document.title = data["title"].strip()
            changed_fields.append("title")

        if "slug" in data:
            new_slug = data["slug"]
            document.custom_slug = True
        elif "title" in changed_fields and not document.custom_slug:
            new_slug = generate_slug(document.title)
            assert_slug(new_slug)
        else:
            new_slug = document.slug

        if new_slug != document.slug:
            clash = type(document).query.filter_by(slug=new_slug).first()
            if clash is not None and clash.id != document.id:
                raise ConflictError("Slug already exists")
            document.slug = new_slug
            changed_fields.append("slug")

        for field in EXTRA_FIELDS[kind]:
            if field in data and getattr(document, field) != data[field]:
                setattr(document, field, data[field])
                changed_fields.append(field)

    current_app.logger.info("%s %s updated: %s", kind, document.id, changed_fields)
    return document
