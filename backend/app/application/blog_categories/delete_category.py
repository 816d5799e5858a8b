from flask import current_app
from app.extensions import db
from app.models.blog_post import BlogPost
from app.domain.exceptions import ConflictError
from app.utils.transaction import transactional
from .lookup import load_category


def delete_category(*, category_id: str) -> None:
    """
    Remove a category. Refused while any blog post still points at it.
    """
    category = load_category(category_id)

    if BlogPost.query.filter_by(category_id=category.id).first() is not None:
        raise ConflictError("Blog category has associated posts")

    with transactional():
        db.session.delete(category)

    current_app.logger.info("Blog category %s deleted", category_id)
