"""
HTML sanitization for user-authored block content.

Two entry points:

- sanitize_html: allow-list based cleaning of arbitrary HTML.
- sanitize_formatted_text: converts the **bold** / *italic* / [text](url)
  shorthand used by text blocks into markup, then runs sanitize_html on it
  with images disabled.

Both always return a string that is safe to insert into a page. When the
underlying cleaner fails the input degrades to plain text; no exception
reaches the caller.
"""
from __future__ import annotations

import logging
import re
from typing import Iterator, Optional
from urllib.parse import urlsplit

import bleach
from bleach import html5lib_shim
from bleach.css_sanitizer import ALLOWED_CSS_PROPERTIES, CSSSanitizer
from bleach.html5lib_shim import Filter
from markupsafe import escape

from app.domain.exceptions import SanitizationFailure

logger = logging.getLogger(__name__)


FORMATTING_TAGS = frozenset({
    "p", "br", "div", "span", "strong", "b", "em", "i", "u",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "blockquote", "pre", "code",
})
LINK_TAGS = frozenset({"a"})
IMAGE_TAGS = frozenset({"img"})

FORMATTING_ATTRIBUTES = ("class", "style")
LINK_ATTRIBUTES = ("href", "title", "target")
IMAGE_ATTRIBUTES = ("src", "alt", "width", "height", "loading")
GLOBAL_ATTRIBUTES = ("id",)

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "tel"})

# Attributes whose value a browser may load or navigate to
URL_ATTRIBUTES = frozenset({"href", "src", "action", "formaction", "background", "poster", "xlink:href"})

LINK_TARGET = "_blank"
LINK_REL = "noopener noreferrer"

BLOCK_CSS_PROPERTIES = ALLOWED_CSS_PROPERTIES | {
    "margin", "padding", "border", "border-radius",
    "border-top-width", "border-top-style",
}

_TAG_RE = re.compile(r"<[^>]*>")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

# Browsers ignore control characters and whitespace inside a scheme
_CONTROL_RE = re.compile(r"[\x00-\x20]")
# Checked against a value with _CONTROL_RE applied
_UNSAFE_CSS_VALUE_RE = re.compile(r"javascript:|vbscript:|expression\(|url\(|\\", re.IGNORECASE)
_UNSAFE_SOURCE_RE = re.compile(r"(on\w+\s*=|javascript:)", re.IGNORECASE)


def is_safe_css_value(value: str) -> bool:
    return not _UNSAFE_CSS_VALUE_RE.search(_CONTROL_RE.sub("", str(value)))


class BlockCSSSanitizer(CSSSanitizer):
    """
    CSSSanitizer only checks property names. This one also drops any
    declaration whose value could load a resource or run script.
    """

    def sanitize_css(self, style):
        cleaned = super().sanitize_css(style)
        if is_safe_css_value(cleaned):
            return cleaned

        declarations = [
            declaration.strip()
            for declaration in cleaned.split(";")
            if ":" in declaration and is_safe_css_value(declaration.split(":", 1)[1])
        ]
        return " ".join(f"{declaration};" for declaration in declarations)


css_sanitizer = BlockCSSSanitizer(allowed_css_properties=BLOCK_CSS_PROPERTIES)


class ForceSafeLinks(Filter):
    """
    Rewrites every anchor that survived cleaning so it opens in a new
    browsing context without access to window.opener.

    Runs on the cleaned token stream of a single Cleaner call.
    """

    def __iter__(self):
        for token in super().__iter__():
            if token["type"] in ("StartTag", "EmptyTag") and token["name"] == "a":
                attrs = dict(token.get("data") or {})
                attrs[(None, "target")] = LINK_TARGET
                attrs[(None, "rel")] = LINK_REL
                token["data"] = attrs
            yield token


def _build_cleaner(allow_links: bool, allow_images: bool, allow_basic_formatting: bool) -> bleach.Cleaner:
    tags = set()
    attributes = {"*": list(GLOBAL_ATTRIBUTES)}

    if allow_basic_formatting:
        tags |= FORMATTING_TAGS
        attributes["*"].extend(FORMATTING_ATTRIBUTES)

    if allow_links:
        tags |= LINK_TAGS
        attributes["a"] = list(LINK_ATTRIBUTES)

    if allow_images:
        tags |= IMAGE_TAGS
        attributes["img"] = list(IMAGE_ATTRIBUTES)

    return bleach.Cleaner(
        tags=frozenset(tags),
        attributes=attributes,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        css_sanitizer=css_sanitizer,
        filters=[ForceSafeLinks],
    )


def _tokens(html: str) -> Iterator[dict]:
    """html5lib token stream of a fragment, entities decoded, no tag filtering."""
    parser = html5lib_shim.BleachHTMLParser(
        tags=None,
        strip=False,
        consume_entities=True,
        namespaceHTMLElements=False,
    )
    walker = html5lib_shim.getTreeWalker("etree")
    return iter(walker(parser.parseFragment(html)))


def _url_scheme(value: str) -> str:
    try:
        return urlsplit(_CONTROL_RE.sub("", value)).scheme.lower()
    except ValueError:
        return "invalid"


def _is_unsafe_tag(token: dict) -> bool:
    if token["name"].lower() == "script":
        return True

    for (_, name), value in (token.get("data") or {}).items():
        name = name.lower()
        if name.startswith("on"):
            return True
        if name in URL_ATTRIBUTES:
            scheme = _url_scheme(value or "")
            if scheme and scheme not in ALLOWED_PROTOCOLS:
                return True
        if name == "style" and not is_safe_css_value(value or ""):
            return True
    return False


def strip_tags(html: str) -> str:
    """Naive last-resort pass: drop anything tag shaped, escape the rest."""
    return str(escape(_TAG_RE.sub("", html or "")))


def contains_unsafe_markup(html: str) -> bool:
    """
    True when a fragment holds a script element, an event handler attribute,
    a URL attribute with a non-allowed scheme or an inline style that could
    run script. Text and other attribute values are not inspected.
    """
    if not html:
        return False

    try:
        return any(
            _is_unsafe_tag(token)
            for token in _tokens(str(html))
            if token["type"] in ("StartTag", "EmptyTag")
        )
    except Exception as exc:
        logger.warning("Could not parse fragment for safety check, treating as unsafe: %s", exc)
        return True


def markup_to_text(html: str) -> str:
    """
    Escaped text of a fragment for degraded display. Image alt text is kept
    in place of the image.
    """
    try:
        pieces = []
        for token in _tokens(str(html or "")):
            if token["type"] == "Characters":
                pieces.append(token["data"])
            elif token["type"] in ("StartTag", "EmptyTag") and token["name"].lower() == "img":
                alt = (token.get("data") or {}).get((None, "alt"))
                if alt:
                    pieces.append(alt)
    except Exception as exc:
        logger.warning("Could not parse fragment, stripping tags instead: %s", exc)
        return strip_tags(html)

    return str(escape(" ".join(piece.strip() for piece in pieces if piece.strip())))


def has_unsafe_content(html: Optional[str]) -> bool:
    """
    Authoring-time advisory for html blocks.
    Flags scripts, inline event handlers and javascript: URIs in the raw
    source. Rendering sanitizes regardless of this result.
    """
    source = html or ""
    return "<script" in source.lower() or bool(_UNSAFE_SOURCE_RE.search(source))


def sanitize_html(
    html: Optional[str],
    *,
    allow_links: bool = True,
    allow_images: bool = True,
    allow_basic_formatting: bool = True,
) -> str:
    if not html:
        return ""

    try:
        cleaner = _build_cleaner(allow_links, allow_images, allow_basic_formatting)
        cleaned = cleaner.clean(html)
        if contains_unsafe_markup(cleaned):
            raise SanitizationFailure("cleaned output still contains executable markup")
        return cleaned
    except Exception as exc:
        logger.warning("Sanitizer failed, falling back to plain text: %s", exc)
        return strip_tags(html)


def format_text(text: str) -> str:
    """
    Single regex pass per marker, in this order: bold, italic, link.
    Nested or overlapping markers are not interpreted further.
    """
    formatted = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    formatted = _ITALIC_RE.sub(r"<em>\1</em>", formatted)
    formatted = _LINK_RE.sub(r'<a href="\2">\1</a>', formatted)
    return formatted


def sanitize_formatted_text(text: Optional[str]) -> str:
    if not text:
        return ""
    return sanitize_html(
        format_text(text),
        allow_links=True,
        allow_images=False,
        allow_basic_formatting=True,
    )


def safe_url(url: Optional[str], default: str = "#") -> str:
    """Returns url when it is relative or uses an allowed scheme, else default."""
    if not url or not isinstance(url, str):
        return default

    candidate = url.strip()
    scheme = _url_scheme(candidate)

    if scheme and scheme not in ALLOWED_PROTOCOLS:
        return default
    return candidate


def sanitize_css(style: str) -> str:
    try:
        return css_sanitizer.sanitize_css(style)
    except Exception as exc:
        logger.warning("CSS sanitizer failed, dropping style: %s", exc)
        return ""
