"""
Data models for page extraction.

This module contains pure data classes with no business logic.
"""

from .page import (
    Author,
    OpenGraph,
    Offer,
    PageMeta,
    ParsedPage,
    Photo,
    Product,
    Review,
    Tags,
    to_dict,
)

__all__ = [
    'PageMeta',
    'OpenGraph',
    'Photo',
    'Tags',
    'Product',
    'Offer',
    'Author',
    'Review',
    'ParsedPage',
    'to_dict',
]
