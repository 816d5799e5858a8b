from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from flask import current_app
from app.extensions import db
from app.domain.exceptions import ConflictError
from app.domain.invariants.document import assert_slug, assert_title, assert_status
from app.utils.slug import generate_slug
from app.utils.transaction import transactional
from .lookup import document_model

EXTRA_FIELDS = {
    "newsletter": ("subject", "preheader"),
    "blog_post": ("excerpt", "author", "image_path", "read_time", "category_id"),
}


def create_document(
    *,
    kind: str,
    data: Dict[str, Any],
):
    """
    Create a newsletter or blog post in DRAFT state (unless a status is given).

    Edge cases handled:
    - Missing title
    - Slug omitted: generated from the title
    - Duplicate slug per document kind
    """
    model = document_model(kind)

    title = data.get("title")
    assert_title(title)

    slug = data.get("slug")
    custom_slug = bool(slug)
    if not custom_slug:
        slug = generate_slug(title)
    assert_slug(slug)

    status = data.get("status", "draft")
    assert_status(status)

    if model.query.filter_by(slug=slug).first():
        raise ConflictError("Slug already exists")

    document = model()
    document.title = title.strip()
    document.slug = slug
    document.custom_slug = custom_slug
    document.status = status

    for field in EXTRA_FIELDS[kind]:
        if field in data:
            setattr(document, field, data[field])

    try:
        with transactional():
            db.session.add(document)
            db.session.flush()  # ensures document.id is available

        current_app.logger.info("%s created: %s (%s)", kind, document.id, document.slug)
        return document

    except IntegrityError as exc:
        # Raced another create on the unique slug constraint
        raise ConflictError("Slug already exists") from exc
