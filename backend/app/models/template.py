from app.extensions import db
from .base import BaseModel


class Template(BaseModel):
    __tablename__ = "templates"

    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    blocks = db.Column(db.JSON, nullable=False, default=list)  # [{"type": ..., "content": {...}}]
    is_default = db.Column(db.Boolean, default=False)
