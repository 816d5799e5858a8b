from typing import List
from flask import current_app
from app.extensions import db
from app.models.block import Block
from app.models.template import Template
from app.domain.blocks.schema import default_content, merge_content
from app.domain.exceptions import NotFoundError
from app.domain.invariants.block import assert_block_type, assert_block_content
from app.utils.order import next_value
from app.utils.transaction import transactional
from app.application.documents.lookup import load_document, document_scope


def load_template(template_id: str) -> Template:
    template = db.session.get(Template, template_id) if template_id else None
    if template is None:
        raise NotFoundError("Template not found")
    return template


def apply_template(
    *,
    newsletter_id: str,
    template_id: str,
) -> List[Block]:
    """
    Append a template's blocks to the end of a newsletter.

    Every template block is validated before the first write, and all of
    them are inserted in a single transaction.
    """
    newsletter = load_document("newsletter", newsletter_id)
    template = load_template(template_id)

    items = template.blocks or []
    for item in items:
        assert_block_type(item.get("type"))
        assert_block_content(item.get("content", {}))

    scope = document_scope(newsletter)
    created: List[Block] = []

    with transactional():
        position = next_value(Block, "position", **scope)
        sequence = next_value(Block, "sequence", **scope)

        for offset, item in enumerate(items):
            block = Block()
            block.newsletter_id = newsletter.id
            block.type = item["type"]
            block.content = merge_content(default_content(item["type"]), item.get("content") or {})
            block.position = position + offset
            block.sequence = sequence + offset
            db.session.add(block)
            created.append(block)

        db.session.flush()

    current_app.logger.info(
        "Applied template %s to newsletter %s (%d blocks)", template.id, newsletter.id, len(created)
    )
    return created
