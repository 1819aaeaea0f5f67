"""Derived article text: excerpt and reading time."""

import math
import re

from bs4 import BeautifulSoup

from newshub.constants import EXCERPT_MAX_CHARS, WORDS_PER_MINUTE

_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(html: str) -> str:
    """Strip tags from rich-text content and collapse whitespace."""
    if not html:
        return ""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def derive_excerpt(html: str, max_chars: int = EXCERPT_MAX_CHARS) -> str:
    """
    Build the listing excerpt from article content.

    Cuts at the last word boundary within ``max_chars`` and appends an ellipsis
    when the text was truncated.
    """
    text = html_to_text(html)
    if len(text) <= max_chars:
        return text

    cut = text[:max_chars]
    boundary = cut.rfind(" ")
    if boundary > 0:
        cut = cut[:boundary]
    return cut.rstrip(" ,.;:") + "..."


def reading_minutes(content: str) -> int:
    """Estimated reading time, counting space-separated chunks of the raw content."""
    return math.ceil(len(content.split(" ")) / WORDS_PER_MINUTE)
