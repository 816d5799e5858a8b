from collections.abc import Mapping
from app.domain.blocks.schema import is_known_type, BLOCK_TYPES
from app.domain.exceptions import ValidationError


def assert_block_type(block_type):
    if not block_type:
        raise ValidationError("Block type is required")

    if not is_known_type(block_type):
        raise ValidationError(
            f"Invalid block type '{block_type}'. Expected one of: {', '.join(BLOCK_TYPES)}"
        )


def assert_block_position(position):
    # bool is an int subclass; reject it explicitly
    if isinstance(position, bool) or not isinstance(position, int):
        raise ValidationError(f"Block position must be an integer, got {position!r}")


def assert_block_content(content):
    if not isinstance(content, Mapping):
        raise ValidationError("Block content must be a JSON object")


def assert_block_style(style):
    if style is not None and not isinstance(style, Mapping):
        raise ValidationError("Block style must be a JSON object")


def assert_reorder_ids(ordered_ids, existing_ids):
    """
    A reorder must name every block of the document exactly once.
    """
    if not isinstance(ordered_ids, list) or not all(isinstance(i, str) for i in ordered_ids):
        raise ValidationError("block_ids must be a list of block ids")

    if len(set(ordered_ids)) != len(ordered_ids):
        raise ValidationError("block_ids contains duplicates")

    missing = set(existing_ids) - set(ordered_ids)
    unknown = set(ordered_ids) - set(existing_ids)
    if missing or unknown:
        raise ValidationError(
            f"block_ids must list every block of the document exactly once "
            f"(missing: {sorted(missing)}, unknown: {sorted(unknown)})"
        )
