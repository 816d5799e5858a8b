from typing import Optional
from flask import current_app
from app.extensions import db
from app.models.template import Template
from app.domain.exceptions import ValidationError
from app.domain.invariants.block import assert_block_type, assert_block_content
from app.utils.transaction import transactional
from app.utils.versioning import snapshot_blocks
from app.application.documents.lookup import load_document


def clean_template_blocks(blocks) -> list:
    """Validated copy of a template body: a list of {type, content} objects."""
    if not isinstance(blocks, list):
        raise ValidationError("Template blocks must be a list")

    for item in blocks:
        if not isinstance(item, dict):
            raise ValidationError("Each template block must be an object")
        assert_block_type(item.get("type"))
        assert_block_content(item.get("content", {}))

    return [
        {"type": item["type"], "content": dict(item.get("content") or {})}
        for item in blocks
    ]


def assert_template_name(name):
    if not name or not isinstance(name, str) or not name.strip():
        raise ValidationError("Template name is required")


def create_template(
    *,
    name: str,
    blocks: list,
    description: Optional[str] = None,
    is_default: bool = False,
) -> Template:
    assert_template_name(name)
    cleaned = clean_template_blocks(blocks)

    template = Template()
    template.name = name.strip()
    template.description = description
    template.is_default = bool(is_default)
    template.blocks = cleaned

    with transactional():
        db.session.add(template)
        db.session.flush()

    current_app.logger.info("Template %s created with %d blocks", template.id, len(template.blocks))
    return template


def save_template(
    *,
    newsletter_id: str,
    name: str,
    description: Optional[str] = None,
) -> Template:
    """
    Capture a newsletter's current blocks (type + content, in order)
    as a reusable template.
    """
    newsletter = load_document("newsletter", newsletter_id)

    return create_template(
        name=name,
        description=description,
        blocks=snapshot_blocks(newsletter),
    )
