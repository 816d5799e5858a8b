from app.domain.blocks.renderer import render_block
from app.domain.sanitizer import has_unsafe_content


def normalize_block(block, admin=False, render=False, editor=False):
    base = {
        "id": block.id,
        "type": block.type,
        "position": block.position,
        "content": block.content or {},
        "style": block.style or None,
        "parent_id": block.parent_id,
    }

    if admin:
        base["sequence"] = block.sequence
        base["created_at"] = block.created_at.isoformat() if block.created_at else None
        base["updated_at"] = block.updated_at.isoformat() if block.updated_at else None

    if render or editor:
        base["html"] = str(render_block(block))

    if editor and block.type == "html":
        base["has_unsafe_content"] = has_unsafe_content((block.content or {}).get("html"))

    return base
