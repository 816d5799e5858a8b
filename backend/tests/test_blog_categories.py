import pytest

from app.application.blog_categories.create_category import create_category
from app.application.blog_categories.update_category import update_category
from app.application.blog_categories.delete_category import delete_category
from app.application.blog_categories.lookup import load_category
from app.application.documents.create_document import create_document
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_category(app):
    category = create_category(name="  Careers ", description="Job advice")

    assert category.name == "Careers"
    assert category.is_active is True


def test_create_duplicate_name(app):
    create_category(name="Careers")

    with pytest.raises(ConflictError):
        create_category(name="Careers")


def test_update_category(app):
    category = create_category(name="Careers")

    updated = update_category(category_id=category.id, data={"name": "Career Advice", "is_active": False})

    assert updated.name == "Career Advice"
    assert updated.is_active is False


def test_update_to_taken_name(app):
    create_category(name="Careers")
    other = create_category(name="News")

    with pytest.raises(ConflictError):
        update_category(category_id=other.id, data={"name": "Careers"})


@pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": 7}])
def test_update_invalid_payload(app, data):
    category = create_category(name="Careers")

    with pytest.raises(ValidationError):
        update_category(category_id=category.id, data=data)


def test_delete_category(app):
    category = create_category(name="Careers")
    category_id = category.id

    delete_category(category_id=category_id)

    with pytest.raises(NotFoundError):
        load_category(category_id)


def test_delete_category_with_posts_is_refused(app):
    category = create_category(name="Careers")
    create_document(kind="blog_post", data={"title": "Finding Work", "category_id": category.id})

    with pytest.raises(ConflictError):
        delete_category(category_id=category.id)

    assert load_category(category.id).name == "Careers"
