from contextlib import contextmanager
from flask import current_app
from app.extensions import db

@contextmanager
def transactional():
    """
    Context manager for database transactions.
    Commits on success; rolls back and re-raises on any failure so no
    partial mutation is persisted.
    """
    try:
        yield
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.error("Transaction rolled back: %s", exc)
        raise
