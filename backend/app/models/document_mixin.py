from app.extensions import db


class DocumentMixin:
    """
    Columns shared by every document that owns an ordered list of blocks.

    Subclasses set BLOCK_FOREIGN_KEY to the Block column pointing back at them.
    """

    BLOCK_FOREIGN_KEY: str = ""
    KIND: str = ""

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    # True once a user typed the slug; stops regeneration from title
    custom_slug = db.Column(db.Boolean, nullable=False, default=False)
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
