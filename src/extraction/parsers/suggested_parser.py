"""
Suggested Offers Parser

Extracts the "suggested products" cards. Each card is read from its
direct children: image, heading, bold price and paragraph description.
"""

import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.currency import get_currency_code
from ...common.text_utils import clean_text
from ...models import Offer
from .selectors import merge_selectors


class SuggestedParser:
    """
    Parses suggested offer cards.

    Usage:
        parser = SuggestedParser(soup)
        offers = parser.parse()
    """

    # Currency glyph followed by the price number
    PRICE_PATTERN = re.compile(r'([^\s])(\d+\.?\d*)')

    def __init__(self, soup: BeautifulSoup, selectors: Optional[Dict[str, str]] = None):
        self.soup = soup
        self.selectors = merge_selectors(selectors)

    def parse(self) -> List[Offer]:
        """Return one Offer per card, in page order."""
        return [self.parse_card(card) for card in self.soup.select(self.selectors['suggested'])]

    def parse_card(self, card: Tag) -> Offer:
        """
        Extract a single offer card.

        Args:
            card: Offer <article> element

        Returns:
            Offer; fields without a source element stay None
        """
        fields = {}
        for elem in card.find_all(recursive=False):
            if elem.name == 'img':
                fields['image'] = elem.get('src', '')
            elif elem.name == 'h3':
                fields['name'] = clean_text(elem.get_text())
            elif elem.name == 'b':
                match = self.PRICE_PATTERN.search(elem.get_text())
                if match:
                    fields['price'] = match.group(2)
                    fields['currency'] = get_currency_code(match.group(1))
            elif elem.name == 'p':
                fields['description'] = clean_text(elem.get_text())
        return Offer(**fields)
