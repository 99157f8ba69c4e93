"""
Page Selectors

CSS selectors describing the structural contract of the product page.
Any of them can be overridden through src/config/selectors.yaml.
"""

from typing import Dict, Optional

DEFAULT_SELECTORS: Dict[str, str] = {
    # Product card
    'product': '.product',
    'thumbnails': '.preview nav img',
    'general_image': '.preview figure img',
    'like_button': '.preview figure button',
    'tags': '.tags span',
    'price': '.price',
    'properties': '.properties li',
    'description': '.description',
    # Suggested offers
    'suggested': '.suggested article',
    # Reviews (relative to a review card)
    'reviews': '.reviews article',
    'rating': '.rating span',
    'author': '.author',
    'review_title': '.title',
    'review_description': '.description',
}


def merge_selectors(overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Combine default selectors with overrides.

    Unknown keys in overrides are ignored.

    Args:
        overrides: Selector name to CSS selector (e.g., from config)

    Returns:
        Complete selector dictionary
    """
    selectors = dict(DEFAULT_SELECTORS)
    if overrides:
        for name, selector in overrides.items():
            if name in selectors and selector:
                selectors[name] = selector
    return selectors
