import re

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def generate_slug(title):
    """'Summer News, 2024!' -> 'summer-news-2024'"""
    slug = _NON_SLUG_RE.sub("-", (title or "").lower())
    return slug.strip("-")
