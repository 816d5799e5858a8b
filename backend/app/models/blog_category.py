from app.extensions import db
from .base import BaseModel


class BlogCategory(BaseModel):
    __tablename__ = "blog_categories"

    name = db.Column(db.String(120), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True)

    posts = db.relationship("BlogPost", back_populates="category")
