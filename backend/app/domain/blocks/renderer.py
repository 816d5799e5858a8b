"""
Block renderer.

`render_block` turns one block into an HTML fragment (a markupsafe.Markup)
that can be dropped into the editor preview or the public page unchanged.
It only needs the block itself: either a Block model or a plain mapping with
`type`, `content` and optionally `id` / `style`.

Rendering never raises. Unknown block types get a visible placeholder and
any fragment that fails the final safety check is replaced by stripped text.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from markupsafe import Markup

from app.domain.blocks.schema import (
    ButtonContent,
    DividerContent,
    HeadingContent,
    HtmlContent,
    ImageContent,
    SpacerContent,
    TextContent,
    parse_content,
)
from app.domain.sanitizer import (
    contains_unsafe_markup,
    is_safe_css_value,
    markup_to_text,
    safe_url,
    sanitize_css,
    sanitize_formatted_text,
    sanitize_html,
)

logger = logging.getLogger(__name__)

HEADING_FONT_SIZES = {
    1: "2rem",
    2: "1.5rem",
    3: "1.25rem",
    4: "1.125rem",
    5: "1rem",
    6: "0.875rem",
}

TEXT_ALIGN_CLASSES = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
    "justify": "text-justify",
}

FONT_SIZE_CLASSES = {"small": "text-sm", "medium": "text-base", "large": "text-lg"}

IMAGE_WIDTHS = {"small": "25%", "medium": "50%", "large": "75%", "full": "100%"}

DIVIDER_WIDTHS = {"75": "75%", "50": "50%", "25": "25%", "full": "100%"}

JUSTIFY_CLASSES = {"left": "justify-start", "center": "justify-center", "right": "justify-end"}

BUTTON_SIZE_CLASSES = {"small": "btn-sm", "medium": "btn-md", "large": "btn-lg"}

# Block-level style overrides (blog editor) -> CSS property
STYLE_PROPERTIES = {
    "color": "color",
    "backgroundColor": "background-color",
    "fontSize": "font-size",
    "fontWeight": "font-weight",
    "textAlign": "text-align",
    "margin": "margin",
    "padding": "padding",
    "borderRadius": "border-radius",
    "border": "border",
}


def _field(block: Any, name: str, default=None):
    if isinstance(block, Mapping):
        return block.get(name, default)
    return getattr(block, name, default)


def block_style_css(style: Optional[Mapping[str, Any]]) -> str:
    if not isinstance(style, Mapping):
        return ""
    declarations = [
        f"{STYLE_PROPERTIES[key]}: {value}"
        for key, value in style.items()
        if key in STYLE_PROPERTIES
        and isinstance(value, (str, int, float))
        and not isinstance(value, bool)
        and str(value).strip()
        and is_safe_css_value(value)
    ]
    if not declarations:
        return ""
    return sanitize_css("; ".join(declarations))


def render_heading(content: HeadingContent) -> Markup:
    return Markup(
        '<h{level} class="block-heading {align}" style="font-size: {size}">{text}</h{level}>'
    ).format(
        level=content.level,
        align=TEXT_ALIGN_CLASSES[content.alignment],
        size=HEADING_FONT_SIZES[content.level],
        text=content.text,
    )


def render_text(content: TextContent) -> Markup:
    return Markup('<div class="block-text {align} {size}">{body}</div>').format(
        align=TEXT_ALIGN_CLASSES[content.alignment],
        size=FONT_SIZE_CLASSES[content.fontSize],
        body=Markup(sanitize_formatted_text(content.text)),
    )


def render_image(content: ImageContent) -> Markup:
    width = IMAGE_WIDTHS[content.width]
    align = TEXT_ALIGN_CLASSES[content.alignment]
    src = safe_url(content.src, default="")

    if not src:
        figure = Markup(
            '<div class="block-image-placeholder" style="width: {width}">'
            '<span class="icon icon-image" aria-hidden="true"></span>'
            "<p>No image selected</p>"
            "</div>"
        ).format(width=width)
    else:
        figure = Markup(
            '<img src="{src}" alt="{alt}" style="width: {width}" loading="lazy">'
        ).format(src=src, alt=content.alt or "Image", width=width)

    caption = Markup("")
    if content.caption:
        caption = Markup('<figcaption class="block-image-caption">{caption}</figcaption>').format(
            caption=content.caption
        )

    return Markup('<figure class="block-image {align}">{figure}{caption}</figure>').format(
        align=align, figure=figure, caption=caption
    )


def render_button(content: ButtonContent) -> Markup:
    href = safe_url(content.url)
    classes = f"btn btn-{content.style} {BUTTON_SIZE_CLASSES[content.size]}"

    if content.is_external and href == content.url:
        anchor = Markup(
            '<a class="{classes}" href="{href}" target="_blank" rel="noopener noreferrer">{text}</a>'
        )
    else:
        anchor = Markup('<a class="{classes}" href="{href}" target="_self">{text}</a>')

    return Markup('<div class="block-button {align}">{anchor}</div>').format(
        align=TEXT_ALIGN_CLASSES[content.alignment],
        anchor=anchor.format(classes=classes, href=href, text=content.text),
    )


def render_divider(content: DividerContent) -> Markup:
    return Markup(
        '<div class="block-divider flex {justify}">'
        '<hr style="width: {width}; border: 0; border-top-width: {thickness}px; '
        'border-top-style: {style}; border-top-color: {color}">'
        "</div>"
    ).format(
        justify=JUSTIFY_CLASSES[content.alignment],
        width=DIVIDER_WIDTHS[content.width],
        thickness=content.thickness,
        style=content.style,
        color=content.color,
    )


def render_spacer(content: SpacerContent) -> Markup:
    return Markup('<div class="block-spacer" style="height: {height}px" aria-hidden="true"></div>').format(
        height=content.height
    )


def render_html(content: HtmlContent) -> Markup:
    if not content.html.strip():
        return Markup(
            '<div class="block-html-placeholder">'
            "<p>Empty HTML block</p>"
            "</div>"
        )
    return Markup('<div class="block-html prose">{body}</div>').format(
        body=Markup(sanitize_html(content.html, allow_images=True))
    )


def render_unknown(block_type: Any) -> Markup:
    return Markup(
        '<div class="block-unknown" role="alert">'
        "<p>Unknown Block Type</p>"
        "<p>Type: {block_type}</p>"
        "</div>"
    ).format(block_type=block_type)


RENDERERS: Dict[str, Callable[[Any], Markup]] = {
    "heading": render_heading,
    "text": render_text,
    "image": render_image,
    "button": render_button,
    "divider": render_divider,
    "spacer": render_spacer,
    "html": render_html,
}


def _render_body(block_type: Any, content: Any) -> Markup:
    renderer = RENDERERS.get(block_type)
    parsed = parse_content(block_type, content) if renderer else None
    if parsed is None:
        return render_unknown(block_type)
    return renderer(parsed)


def render_block(block: Any) -> Markup:
    block_type = _field(block, "type")
    content = _field(block, "content") or {}
    block_id = _field(block, "id") or ""

    try:
        body = _render_body(block_type, content)
    except Exception:
        logger.exception("Failed to render %s block %s", block_type, block_id)
        body = render_unknown(block_type)

    if contains_unsafe_markup(body):
        logger.error("Unsafe markup produced for %s block %s, degrading to text", block_type, block_id)
        body = Markup(markup_to_text(str(body)))

    css = block_style_css(_field(block, "style"))
    wrapper = '<div class="content-block content-block--{type}" data-block-id="{id}"'
    if css:
        wrapper += ' style="{css}"'
    wrapper += ">{body}</div>"

    return Markup(wrapper).format(type=block_type, id=block_id, css=css, body=body)


def sort_blocks(blocks: Iterable[Any]) -> list:
    """Document order: position, then insertion sequence."""
    def key(pair):
        index, block = pair
        sequence = _field(block, "sequence")
        return (
            _field(block, "position") or 0,
            index if sequence is None else sequence,
            index,
        )

    return [block for _, block in sorted(enumerate(blocks), key=key)]


def render_blocks(blocks: Iterable[Any]) -> Markup:
    return Markup("").join(render_block(block) for block in sort_blocks(blocks))
