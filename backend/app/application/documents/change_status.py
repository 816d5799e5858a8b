from datetime import datetime, timezone
from flask import current_app
from app.domain.invariants.document import assert_status
from app.domain.lifecycle.document import assert_document_transition
from app.utils.transaction import transactional
from .lookup import load_document


def change_status(
    *,
    kind: str,
    document_id: str,
    to_status: str,
):
    """
    Move a document through its lifecycle (draft / published / archived).

    Publishing a blog post stamps published_at the first time.
    """
    assert_status(to_status)
    document = load_document(kind, document_id)

    with transactional():
        assert_document_transition(from_status=document.status, to_status=to_status)
        document.status = to_status

        if to_status == "published" and hasattr(document, "published_at") and document.published_at is None:
            document.published_at = datetime.now(timezone.utc)

    current_app.logger.info("%s %s -> %s", kind, document.id, to_status)
    return document
