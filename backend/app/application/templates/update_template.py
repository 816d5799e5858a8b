from typing import Any, Dict
from flask import current_app
from app.models.template import Template
from app.domain.exceptions import ValidationError
from app.utils.transaction import transactional
from .apply_template import load_template
from .save_template import assert_template_name, clean_template_blocks

ALLOWED_UPDATE_FIELDS = {"name", "description", "blocks", "is_default"}


def update_template(
    *,
    template_id: str,
    data: Dict[str, Any],
) -> Template:
    """
    Partial update of a template. A new `blocks` list replaces the old one
    and is validated the same way as on create.
    """
    template = load_template(template_id)

    fields = ALLOWED_UPDATE_FIELDS & set(data)
    if not fields:
        raise ValidationError("No valid fields provided for update")

    if "name" in fields:
        assert_template_name(data["name"])
    blocks = clean_template_blocks(data["blocks"]) if "blocks" in fields else None

    with transactional():
        if "name" in fields:
            template.name = data["name"].strip()
        if "description" in fields:
            template.description = data["description"]
        if "blocks" in fields:
            template.blocks = blocks
        if "is_default" in fields:
            template.is_default = bool(data["is_default"])

    current_app.logger.info("Template %s updated: %s", template.id, sorted(fields))
    return template
