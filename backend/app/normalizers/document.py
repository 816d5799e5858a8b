from app.domain.blocks.renderer import render_blocks
from .block import normalize_block


def _timestamp(value):
    return value.isoformat() if value else None


def _document_fields(document):
    if document.KIND == "newsletter":
        return {
            "subject": document.subject,
            "preheader": document.preheader,
        }
    return {
        "excerpt": document.excerpt,
        "author": document.author,
        "image_path": document.image_path,
        "read_time": document.read_time,
        "category_id": document.category_id,
        "published_at": _timestamp(document.published_at),
    }


def normalize_document(document, admin=False, include_blocks=False, render=False):
    data = {
        "id": document.id,
        "kind": document.KIND,
        "title": document.title,
        "slug": document.slug,
        "status": document.status,
        **_document_fields(document),
    }

    if admin:
        data["custom_slug"] = document.custom_slug
        data["created_at"] = _timestamp(document.created_at)
        data["updated_at"] = _timestamp(document.updated_at)

    if include_blocks:
        data["blocks"] = [
            normalize_block(b, admin=admin, render=render)
            for b in document.blocks
        ]

    if render:
        data["html"] = str(render_blocks(document.blocks))

    return data
