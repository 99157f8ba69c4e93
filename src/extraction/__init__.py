"""
Product page extraction.

Modules:
    page_extractor - PageExtractor and the parse_page / parse_html entry points
    validator - PageValidator for extraction completeness reports
    parsers - Section parsers (meta, product, suggested, reviews)
"""

from .page_extractor import PageExtractor, parse_html, parse_page
from .validator import PageValidator
from .parsers import (
    MetaParser,
    ProductParser,
    ReviewsParser,
    SuggestedParser,
)

__all__ = [
    # Entry points
    'PageExtractor',
    'parse_page',
    'parse_html',
    # Validator
    'PageValidator',
    # Parsers
    'MetaParser',
    'ProductParser',
    'SuggestedParser',
    'ReviewsParser',
]
