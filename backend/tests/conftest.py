from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask

from app import create_app
from app.extensions import db
from app.application.documents.create_document import create_document


@pytest.fixture
def app() -> Iterator[Flask]:
    """Application on an in-memory SQLite database, schema created per test."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        try:
            yield app
        finally:
            db.session.remove()
            db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def newsletter(app):
    return create_document(kind="newsletter", data={"title": "Spring Update"})


@pytest.fixture
def blog_post(app):
    return create_document(kind="blog_post", data={"title": "Caring at Home", "author": "Editorial"})
