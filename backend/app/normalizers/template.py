def normalize_template(template, include_blocks=True):
    data = {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "is_default": bool(template.is_default),
        "block_count": len(template.blocks or []),
        "created_at": template.created_at.isoformat() if template.created_at else None,
    }

    if include_blocks:
        data["blocks"] = template.blocks or []

    return data
