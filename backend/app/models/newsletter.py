from app.extensions import db
from .base import BaseModel
from .document_mixin import DocumentMixin


class Newsletter(BaseModel, DocumentMixin):
    __tablename__ = "newsletters"

    KIND = "newsletter"
    BLOCK_FOREIGN_KEY = "newsletter_id"

    subject = db.Column(db.String(255), nullable=True)
    preheader = db.Column(db.String(255), nullable=True)

    blocks = db.relationship(
        "Block",
        back_populates="newsletter",
        order_by="[Block.position, Block.sequence]",
        cascade="all, delete-orphan",
    )
