from typing import Any, Dict, Optional
from flask import current_app
from app.extensions import db
from app.models.block import Block
from app.domain.blocks.schema import default_content, merge_content
from app.domain.invariants.block import (
    assert_block_type,
    assert_block_position,
    assert_block_content,
    assert_block_style,
)
from app.utils.order import next_value
from app.utils.transaction import transactional
from app.application.documents.lookup import load_document, document_scope


def add_block(
    *,
    kind: str,
    document_id: str,
    block_type: str,
    position: Optional[int] = None,
    content: Optional[Dict[str, Any]] = None,
    style: Optional[Dict[str, Any]] = None,
    parent_id: Optional[str] = None,
) -> Block:
    """
    Attach a new block to a persisted document.

    - Content starts from the type's default payload; `content` is
      shallow-merged over it
    - Without an explicit position the block is appended at
      max(position) + 1, or 0 for an empty document
    """
    assert_block_type(block_type)
    if position is not None:
        assert_block_position(position)
    if content is not None:
        assert_block_content(content)
    assert_block_style(style)

    document = load_document(kind, document_id)
    scope = document_scope(document)

    with transactional():
        block = Block()
        setattr(block, document.BLOCK_FOREIGN_KEY, document.id)
        block.type = block_type
        block.content = merge_content(default_content(block_type), content or {})
        block.style = dict(style) if style else None
        block.position = next_value(Block, "position", **scope) if position is None else position
        block.sequence = next_value(Block, "sequence", **scope)
        block.parent_id = parent_id

        db.session.add(block)
        db.session.flush()

    current_app.logger.info(
        "Block %s (%s) added to %s %s at position %s",
        block.id, block.type, kind, document.id, block.position,
    )
    return block
