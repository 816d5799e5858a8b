from app.extensions import db
from app.models.newsletter import Newsletter
from app.models.blog_post import BlogPost
from app.models.block import Block
from app.domain.exceptions import NotFoundError, ValidationError

DOCUMENT_MODELS = {
    Newsletter.KIND: Newsletter,
    BlogPost.KIND: BlogPost,
}

LABELS = {
    Newsletter.KIND: "Newsletter",
    BlogPost.KIND: "Blog post",
}


def document_model(kind: str):
    try:
        return DOCUMENT_MODELS[kind]
    except KeyError:
        raise ValidationError(f"Unknown document kind '{kind}'") from None


def load_document(kind: str, document_id: str):
    """
    Fetch a persisted document or raise NotFoundError.
    Blocks can only be attached to documents that already exist.
    """
    model = document_model(kind)
    document = db.session.get(model, document_id) if document_id else None

    if document is None:
        raise NotFoundError(f"{LABELS[kind]} not found")

    return document


def document_scope(document):
    """filter_by() keywords selecting the blocks owned by document."""
    return {document.BLOCK_FOREIGN_KEY: document.id}


def load_block(block_id: str, document=None) -> Block:
    block = db.session.get(Block, block_id) if block_id else None

    if block is None:
        raise NotFoundError("Block not found")

    if document is not None and getattr(block, document.BLOCK_FOREIGN_KEY) != document.id:
        raise NotFoundError("Block not found")

    return block
