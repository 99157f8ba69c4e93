"""
Text Utilities

Helper functions for text and markup cleanup.
"""

import re

# Separator between the page title and the site name ("Product — Shop")
TITLE_SEPARATOR = '—'

_OPENING_TAG = re.compile(r'<(\w+)([^>]*)>')


def clean_text(text: str) -> str:
    """Trim text; None becomes an empty string."""
    if not text:
        return ""
    return text.strip()


def split_title(text: str) -> str:
    """
    Return the part of a title before the em-dash separator.

    Args:
        text: Title text, e.g. "Кроссовки Nike — Магазин"

    Returns:
        Trimmed leading part, e.g. "Кроссовки Nike"
    """
    if not text:
        return ""
    return text.split(TITLE_SEPARATOR)[0].strip()


def strip_tag_attributes(markup: str) -> str:
    """
    Remove all attributes from opening tags.

    Tag names and closing tags are kept, so "<p class="x">a</p>"
    becomes "<p>a</p>". This keeps structure, it is not a sanitizer.

    Args:
        markup: HTML fragment

    Returns:
        Fragment with attribute-free opening tags
    """
    if not markup:
        return ""
    return _OPENING_TAG.sub(r'<\1>', markup)
