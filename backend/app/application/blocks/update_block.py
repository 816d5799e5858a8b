from typing import Any, Dict, Optional
from flask import current_app
from app.models.block import Block
from app.domain.blocks.schema import merge_content
from app.domain.exceptions import ValidationError
from app.domain.invariants.block import (
    assert_block_type,
    assert_block_position,
    assert_block_content,
    assert_block_style,
)
from app.utils.transaction import transactional
from app.application.documents.lookup import load_block, load_document

ALLOWED_UPDATE_FIELDS = {"type", "content", "position", "style", "parent_id"}


def update_block(
    *,
    block_id: str,
    data: Dict[str, Any],
    kind: Optional[str] = None,
    document_id: Optional[str] = None,
) -> Block:
    """
    Apply a partial update to a block.

    - `content` is shallow-merged into the stored payload: new keys
      overwrite, untouched keys are preserved, nested objects are replaced
    - `style` is replaced as a whole
    - Sibling positions are never touched
    """
    document = load_document(kind, document_id) if kind else None
    block = load_block(block_id, document)

    fields = ALLOWED_UPDATE_FIELDS & set(data)
    if not fields:
        raise ValidationError("No valid fields provided for update")

    if "type" in fields:
        assert_block_type(data["type"])
    if "content" in fields:
        assert_block_content(data["content"])
    if "position" in fields:
        assert_block_position(data["position"])
    if "style" in fields:
        assert_block_style(data["style"])

    with transactional():
        if "type" in fields:
            block.type = data["type"]
        if "content" in fields:
            # new dict so the JSON column registers the change
            block.content = merge_content(block.content, data["content"])
        if "position" in fields:
            block.position = data["position"]
        if "style" in fields:
            block.style = dict(data["style"]) if data["style"] else None
        if "parent_id" in fields:
            block.parent_id = data["parent_id"]

    current_app.logger.info("Block %s updated: %s", block.id, sorted(fields))
    return block
