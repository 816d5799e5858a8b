from typing import List
from app.models.block import Block
from app.application.documents.lookup import load_document, document_scope


def list_blocks(*, kind: str, document_id: str) -> List[Block]:
    """Blocks of a document in render order (position, then insertion)."""
    document = load_document(kind, document_id)

    return (
        Block.query.filter_by(**document_scope(document))
        .order_by(Block.position.asc(), Block.sequence.asc())
        .all()
    )
