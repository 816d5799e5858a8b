"""
Block content shapes.

A block's `content` is an untyped JSON object; each block type reads its own
fields out of it through one of the dataclasses below. Missing or invalid
fields fall back to the type default, out-of-range numbers are clamped.
Nothing here rejects a payload.
"""
from __future__ import annotations

import math
import re
import sys
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Type

BLOCK_TYPES = ("heading", "text", "image", "button", "divider", "spacer", "html")

ALIGNMENTS = ("left", "center", "right")
TEXT_ALIGNMENTS = ALIGNMENTS + ("justify",)
SIZES = ("small", "medium", "large")

SPACER_MIN_HEIGHT = 8
SPACER_MAX_HEIGHT = 200

_COLOR_RE = re.compile(r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]{3,20})$")


def _choice(value: Any, allowed, default):
    return value if value in allowed else default


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, float) and math.isinf(value):
        # out of range on purpose; callers clamp
        return sys.maxsize if value > 0 else -sys.maxsize
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class HeadingContent:
    text: str = "New Heading"
    level: int = 2
    alignment: str = "left"

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "HeadingContent":
        return cls(
            text=_text(content.get("text"), cls.text) or cls.text,
            level=clamp(_int(content.get("level"), cls.level), 1, 6),
            alignment=_choice(content.get("alignment"), ALIGNMENTS, cls.alignment),
        )


@dataclass(frozen=True)
class TextContent:
    text: str = "Add your text content here..."
    alignment: str = "left"
    fontSize: str = "medium"

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "TextContent":
        return cls(
            text=_text(content.get("text"), cls.text) or cls.text,
            alignment=_choice(content.get("alignment"), TEXT_ALIGNMENTS, cls.alignment),
            fontSize=_choice(content.get("fontSize"), SIZES, cls.fontSize),
        )


@dataclass(frozen=True)
class ImageContent:
    src: str = ""
    alt: str = ""
    caption: str = ""
    alignment: str = "center"
    width: str = "full"

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "ImageContent":
        return cls(
            src=_text(content.get("src"), cls.src).strip(),
            alt=_text(content.get("alt"), cls.alt),
            caption=_text(content.get("caption"), cls.caption),
            alignment=_choice(content.get("alignment"), ALIGNMENTS, cls.alignment),
            width=_choice(content.get("width"), SIZES + ("full",), cls.width),
        )


@dataclass(frozen=True)
class ButtonContent:
    text: str = "Click Here"
    url: str = "#"
    alignment: str = "left"
    style: str = "primary"
    size: str = "medium"

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "ButtonContent":
        return cls(
            text=_text(content.get("text"), cls.text) or cls.text,
            url=_text(content.get("url"), cls.url).strip() or cls.url,
            alignment=_choice(content.get("alignment"), ALIGNMENTS, cls.alignment),
            style=_choice(content.get("style"), ("primary", "secondary", "outline", "ghost"), cls.style),
            size=_choice(content.get("size"), SIZES, cls.size),
        )

    @property
    def is_external(self) -> bool:
        return self.url.startswith("http")


@dataclass(frozen=True)
class DividerContent:
    style: str = "solid"
    thickness: int = 1
    color: str = "#e2e8f0"
    width: str = "full"  # full | 75 | 50 | 25
    alignment: str = "center"

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "DividerContent":
        color = _text(content.get("color"), cls.color).strip()
        return cls(
            style=_choice(content.get("style"), ("solid", "dashed", "dotted"), cls.style),
            thickness=clamp(_int(content.get("thickness"), cls.thickness), 1, 4),
            color=color if _COLOR_RE.match(color) else cls.color,
            width=_choice(str(content.get("width", cls.width)), ("full", "75", "50", "25"), cls.width),
            alignment=_choice(content.get("alignment"), ALIGNMENTS, cls.alignment),
        )


@dataclass(frozen=True)
class SpacerContent:
    height: int = 32

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "SpacerContent":
        height = _int(content.get("height"), cls.height)
        return cls(height=clamp(height, SPACER_MIN_HEIGHT, SPACER_MAX_HEIGHT))


@dataclass(frozen=True)
class HtmlContent:
    html: str = ""

    @classmethod
    def from_content(cls, content: Mapping[str, Any]) -> "HtmlContent":
        return cls(html=_text(content.get("html"), cls.html))


CONTENT_TYPES: Dict[str, Type] = {
    "heading": HeadingContent,
    "text": TextContent,
    "image": ImageContent,
    "button": ButtonContent,
    "divider": DividerContent,
    "spacer": SpacerContent,
    "html": HtmlContent,
}


def is_known_type(block_type: Any) -> bool:
    return block_type in CONTENT_TYPES


def default_content(block_type: str) -> Dict[str, Any]:
    """Payload stored on a freshly created block; {} for unknown types."""
    content_cls = CONTENT_TYPES.get(block_type)
    return asdict(content_cls()) if content_cls else {}


def parse_content(block_type: str, content: Optional[Mapping[str, Any]]):
    """Typed view of a payload, or None when the type is not recognised."""
    content_cls = CONTENT_TYPES.get(block_type)
    if content_cls is None:
        return None
    return content_cls.from_content(content if isinstance(content, Mapping) else {})


def merge_content(existing: Optional[Mapping[str, Any]], updates: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge: top-level keys in `updates` replace those in `existing`.
    Nested objects are replaced wholesale, never merged recursively.
    """
    merged = dict(existing or {})
    merged.update(updates)
    return merged
