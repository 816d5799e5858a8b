from app.extensions import db
from .base import BaseModel
from .document_mixin import DocumentMixin


class BlogPost(BaseModel, DocumentMixin):
    __tablename__ = "blog_posts"

    KIND = "blog_post"
    BLOCK_FOREIGN_KEY = "blog_post_id"

    excerpt = db.Column(db.Text, nullable=True)
    author = db.Column(db.String(200), nullable=True)
    image_path = db.Column(db.String(512), nullable=True)  # object storage URL
    read_time = db.Column(db.String(50), nullable=True)  # e.g. "5 min read"
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    category_id = db.Column(db.String(36), db.ForeignKey("blog_categories.id"), nullable=True)
    category = db.relationship("BlogCategory", back_populates="posts")

    blocks = db.relationship(
        "Block",
        back_populates="blog_post",
        order_by="[Block.position, Block.sequence]",
        cascade="all, delete-orphan",
    )
