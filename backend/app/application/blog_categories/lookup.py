from app.extensions import db
from app.models.blog_category import BlogCategory
from app.domain.exceptions import NotFoundError, ValidationError


def load_category(category_id: str) -> BlogCategory:
    category = db.session.get(BlogCategory, category_id) if category_id else None
    if category is None:
        raise NotFoundError("Blog category not found")
    return category


def clean_category_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required")
    return name.strip()
