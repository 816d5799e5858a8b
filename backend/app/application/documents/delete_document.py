from flask import current_app
from app.extensions import db
from .lookup import load_document
from app.utils.transaction import transactional


def delete_document(
    *,
    kind: str,
    document_id: str,
) -> None:
    """
    Hard-delete a document; its blocks go with it (delete-orphan cascade).
    """
    document = load_document(kind, document_id)

    with transactional():
        db.session.delete(document)

    current_app.logger.info("%s %s deleted", kind, document_id)
