from flask import current_app
from app.extensions import db
from app.utils.transaction import transactional
from .apply_template import load_template


def delete_template(*, template_id: str) -> None:
    template = load_template(template_id)

    with transactional():
        db.session.delete(template)

    current_app.logger.info("Template %s deleted", template_id)
