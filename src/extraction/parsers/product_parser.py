"""
Product Parser

Extracts the product card from the page:
- Identity: data-id of the product container, name from its h1
- Gallery images, with the currently displayed image moved to the front
- Like status from the like button state
- Tags grouped by marker class (green/blue/red)
- Current and old price, discount and currency from the price block
- Properties list as a key/value mapping
- Description markup with tag attributes removed
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.currency import get_currency_code
from ...common.text_utils import clean_text, strip_tag_attributes
from ...models import Photo, Product, Tags
from .selectors import merge_selectors

logger = logging.getLogger(__name__)


class ProductParser:
    """
    Parses the product card.

    Every sub-step is a public method working on the product container,
    so each can be exercised on its own.

    Usage:
        parser = ProductParser(soup)
        product = parser.parse()
        images = parser.extract_images(parser.find_container())
    """

    # Currency glyph, current price, then the old price in a nested <span>
    PRICE_PATTERN = re.compile(r'([^\s])(\d+\.?\d*)\s*<span>\s*[^\s](\d+\.?\d*)\s*</span>')

    # Marker class -> Tags attribute
    TAG_CLASSES = {
        'green': 'category',
        'blue': 'label',
        'red': 'discount',
    }

    ACTIVE_CLASS = 'active'

    def __init__(self, soup: BeautifulSoup, selectors: Optional[Dict[str, str]] = None):
        self.soup = soup
        self.selectors = merge_selectors(selectors)

    def find_container(self) -> Optional[Tag]:
        """Return the first product container, or None."""
        return self.soup.select_one(self.selectors['product'])

    def parse(self) -> Optional[Product]:
        """
        Extract the product card.

        Returns:
            Product, or None when the page has no product container
        """
        section = self.find_container()
        if section is None:
            logger.warning("No product container (%s) on page", self.selectors['product'])
            return None

        name = section.find('h1')
        price = self.extract_price(section)

        return Product(
            id=section.get('data-id', ''),
            name=clean_text(name.get_text()) if name else "",
            description=self.extract_description(section),
            images=self.extract_images(section),
            is_liked=self.extract_is_liked(section),
            tags=self.extract_tags(section),
            properties=self.extract_properties(section),
            **price,
        )

    def extract_images(self, section: Tag) -> List[Photo]:
        """
        Extract gallery images in display order.

        The thumbnail whose full URL matches the currently displayed image
        is moved to index 0; the rest keep their relative order.

        Args:
            section: Product container

        Returns:
            List of Photo objects
        """
        images = [
            Photo(
                preview=img.get('src', ''),
                full=img.get('data-src', ''),
                alt=img.get('alt', ''),
            )
            for img in section.select(self.selectors['thumbnails'])
        ]

        general = section.select_one(self.selectors['general_image'])
        if general is None:
            return images

        current = general.get('src')
        for index, image in enumerate(images):
            if image.full == current:
                if index != 0:
                    images.insert(0, images.pop(index))
                break
        else:
            logger.debug("Displayed image %s is not among thumbnails", current)

        return images

    def extract_is_liked(self, section: Tag) -> bool:
        """Return True if the like button carries the active class."""
        button = section.select_one(self.selectors['like_button'])
        if button is None:
            return False
        return self.ACTIVE_CLASS in button.get('class', [])

    def extract_tags(self, section: Tag) -> Tags:
        """
        Group tag labels by marker class.

        A tag lands in exactly one bucket; tags without a known
        marker class are dropped.

        Args:
            section: Product container

        Returns:
            Tags with category, label and discount lists
        """
        tags = Tags()
        for span in section.select(self.selectors['tags']):
            bucket = self._tag_bucket(span.get('class', []))
            if bucket is None:
                continue
            getattr(tags, bucket).append(clean_text(span.get_text()))
        return tags

    def _tag_bucket(self, classes: List[str]) -> Optional[str]:
        for css_class in classes:
            if css_class in self.TAG_CLASSES:
                return self.TAG_CLASSES[css_class]
        return None

    def extract_price(self, section: Tag) -> Dict[str, object]:
        """
        Parse the price block.

        Example:
            "₽199.99<span>₽249.99</span>" gives price=199.99,
            old_price=249.99, currency="RUB", discount=50.0,
            discount_percent="20.00%"

        Args:
            section: Product container

        Returns:
            Dictionary of Product price fields; empty when the block
            is missing or does not match, leaving all of them None
        """
        block = section.select_one(self.selectors['price'])
        if block is None:
            logger.debug("No price block on page")
            return {}

        match = self.PRICE_PATTERN.search(block.decode_contents())
        if not match:
            logger.debug("Price block did not match: %r", block.decode_contents()[:80])
            return {}

        price = float(match.group(2))
        old_price = float(match.group(3))
        difference = old_price - price
        discount = round(difference, 2)
        if old_price:
            discount_percent = f"{difference / old_price * 100:.2f}%"
        else:
            discount_percent = None

        return {
            'price': price,
            'old_price': old_price,
            'currency': get_currency_code(match.group(1)),
            'discount': discount,
            'discount_percent': discount_percent,
        }

    def extract_properties(self, section: Tag) -> Dict[str, str]:
        """
        Extract the properties list.

        The first child element of each item is the key and the last is
        the value. A repeated key keeps the later value.

        Args:
            section: Product container

        Returns:
            Dictionary of property name to value
        """
        properties = {}
        for item in section.select(self.selectors['properties']):
            children = item.find_all(recursive=False)
            if not children:
                continue
            key = clean_text(children[0].get_text())
            properties[key] = clean_text(children[-1].get_text())
        return properties

    def extract_description(self, section: Tag) -> str:
        """Return description markup with attributes removed from every tag."""
        block = section.select_one(self.selectors['description'])
        if block is None:
            return ""
        return strip_tag_attributes(block.decode_contents().strip())
