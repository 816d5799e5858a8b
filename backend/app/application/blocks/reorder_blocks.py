from typing import List
from flask import current_app
from app.models.block import Block
from app.domain.invariants.block import assert_reorder_ids
from app.utils.order import apply_order
from app.utils.transaction import transactional
from app.application.documents.lookup import load_document, document_scope


def reorder_blocks(
    *,
    kind: str,
    document_id: str,
    block_ids: List[str],
) -> List[Block]:
    """
    Rewrite positions to 0..n-1 following block_ids.

    block_ids must be the document's complete block list. The new positions
    are written by one statement inside one transaction; on any error
    nothing changes.
    """
    document = load_document(kind, document_id)
    scope = document_scope(document)

    existing_ids = [
        row_id for (row_id,) in Block.query.with_entities(Block.id).filter_by(**scope)
    ]
    assert_reorder_ids(block_ids, existing_ids)

    with transactional():
        apply_order(Block, block_ids, order_field="position")

    current_app.logger.info("Reordered %d blocks on %s %s", len(block_ids), kind, document.id)

    return (
        Block.query.filter_by(**scope)
        .order_by(Block.position.asc(), Block.sequence.asc())
        .all()
    )
