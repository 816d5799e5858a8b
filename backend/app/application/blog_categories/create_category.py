from typing import Optional
from sqlalchemy.exc import IntegrityError
from flask import current_app
from app.extensions import db
from app.models.blog_category import BlogCategory
from app.domain.exceptions import ConflictError
from app.utils.transaction import transactional
from .lookup import clean_category_name


def create_category(
    *,
    name: str,
    description: Optional[str] = None,
    is_active: bool = True,
) -> BlogCategory:
    name = clean_category_name(name)

    if BlogCategory.query.filter_by(name=name).first():
        raise ConflictError("A category with this name already exists")

    category = BlogCategory()
    category.name = name
    category.description = description
    category.is_active = bool(is_active)

    try:
        with transactional():
            db.session.add(category)
            db.session.flush()
    except IntegrityError as exc:
        raise ConflictError("A category with this name already exists") from exc

    current_app.logger.info("Blog category %s created: %s", category.id, category.name)
    return category
