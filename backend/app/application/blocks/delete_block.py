from typing import Optional
from flask import current_app
from app.extensions import db
from app.utils.transaction import transactional
from app.application.documents.lookup import load_block, load_document


def delete_block(
    *,
    block_id: str,
    kind: Optional[str] = None,
    document_id: Optional[str] = None,
) -> None:
    """
    Remove a block. Remaining positions are left as they are; gaps are fine.
    """
    document = load_document(kind, document_id) if kind else None
    block = load_block(block_id, document)

    with transactional():
        db.session.delete(block)

    current_app.logger.info("Block %s deleted", block_id)
