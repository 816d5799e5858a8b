from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from flask import current_app
from app.models.blog_category import BlogCategory
from app.domain.exceptions import ConflictError, ValidationError
from app.utils.transaction import transactional
from .lookup import clean_category_name, load_category

ALLOWED_UPDATE_FIELDS = {"name", "description", "is_active"}


def update_category(
    *,
    category_id: str,
    data: Dict[str, Any],
) -> BlogCategory:
    category = load_category(category_id)

    fields = ALLOWED_UPDATE_FIELDS & set(data)
    if not fields:
        raise ValidationError("No valid fields provided for update")

    name = clean_category_name(data["name"]) if "name" in fields else category.name
    if name != category.name:
        clash = BlogCategory.query.filter_by(name=name).first()
        if clash is not None and clash.id != category.id:
            raise ConflictError("A category with this name already exists")

    try:
        with transactional():
            category.name = name
            if "description" in fields:
                category.description = data["description"]
            if "is_active" in fields:
                category.is_active = bool(data["is_active"])
    except IntegrityError as exc:
        raise ConflictError("A category with this name already exists") from exc

    current_app.logger.info("Blog category %s updated: %s", category.id, sorted(fields))
    return category
