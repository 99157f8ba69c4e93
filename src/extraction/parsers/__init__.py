"""
Section parsers for product page extraction.

Each parser handles one region of the page:
- MetaParser: document head (title, description, keywords, OpenGraph)
- ProductParser: product card (images, tags, price, properties)
- SuggestedParser: suggested offer cards
- ReviewsParser: customer reviews
"""

from .meta_parser import MetaParser
from .product_parser import ProductParser
from .reviews_parser import ReviewsParser
from .selectors import DEFAULT_SELECTORS, merge_selectors
from .suggested_parser import SuggestedParser

__all__ = [
    'MetaParser',
    'ProductParser',
    'SuggestedParser',
    'ReviewsParser',
    'DEFAULT_SELECTORS',
    'merge_selectors',
]
