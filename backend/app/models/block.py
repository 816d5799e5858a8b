from app.extensions import db
from .base import BaseModel

class Block(BaseModel):
    __tablename__ = "blocks"

    # Exactly one owner is set
    newsletter_id = db.Column(
        db.String(36), db.ForeignKey("newsletters.id", ondelete="CASCADE"), nullable=True, index=True
    )
    blog_post_id = db.Column(
        db.String(36), db.ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=True, index=True
    )

    type = db.Column(db.String(50), nullable=False)  # heading, text, image, button, divider, spacer, html
    content = db.Column(db.JSON, nullable=False, default=dict)
    style = db.Column(db.JSON, nullable=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    sequence = db.Column(db.Integer, nullable=False, default=0)  # insertion order, breaks position ties
    parent_id = db.Column(db.String(36), nullable=True)  # reserved, not read by any renderer

    newsletter = db.relationship("Newsletter", back_populates="blocks")
    blog_post = db.relationship("BlogPost", back_populates="blocks")

    __table_args__ = (
        db.CheckConstraint(
            "(newsletter_id IS NULL) <> (blog_post_id IS NULL)",
            name="ck_block_single_owner",
        ),
        db.Index("idx_block_newsletter_order", "newsletter_id", "position", "sequence"),
        db.Index("idx_block_blog_post_order", "blog_post_id", "position", "sequence"),
    )

    @property
    def document_id(self):
        return self.newsletter_id or self.blog_post_id
