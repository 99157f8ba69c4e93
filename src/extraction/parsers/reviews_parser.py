"""
Reviews Parser

Extracts customer reviews:
- Rating as the run of filled stars counted from the left
- Author avatar, name and review date from the author block
- Title and description text
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.text_utils import clean_text
from ...models import Author, Review
from .selectors import merge_selectors

logger = logging.getLogger(__name__)


class ReviewsParser:
    """
    Parses review cards.

    Usage:
        parser = ReviewsParser(soup)
        reviews = parser.parse()
    """

    FILLED_CLASS = 'filled'

    DATE_PATTERN = re.compile(r'(\d{2})/(\d{2})/(\d{4})')

    def __init__(self, soup: BeautifulSoup, selectors: Optional[Dict[str, str]] = None):
        self.soup = soup
        self.selectors = merge_selectors(selectors)

    def parse(self) -> List[Review]:
        """Return one Review per card, in page order."""
        return [self.parse_card(card) for card in self.soup.select(self.selectors['reviews'])]

    def parse_card(self, card: Tag) -> Review:
        """
        Extract a single review card.

        Args:
            card: Review <article> element

        Returns:
            Review
        """
        author, date = self.extract_author(card)
        title, description = self.extract_text(card)
        return Review(
            author=author,
            rating=self.extract_rating(card),
            title=title,
            description=description,
            date=date,
        )

    def extract_rating(self, card: Tag) -> int:
        """
        Count filled stars from the left, stopping at the first empty one.

        filled, filled, filled, empty, filled -> 3
        """
        rating = 0
        for star in card.select(self.selectors['rating']):
            if self.FILLED_CLASS not in star.get('class', []):
                break
            rating += 1
        return rating

    def extract_author(self, card: Tag) -> tuple:
        """
        Read the author block.

        Returns:
            Tuple of (Author, date) where date is "DD.MM.YYYY" or None
        """
        block = card.select_one(self.selectors['author'])
        if block is None:
            logger.debug("Review without author block")
            return Author(), None

        fields = {}
        date = None
        for elem in block.find_all(recursive=False):
            if elem.name == 'img':
                fields['avatar'] = elem.get('src', '')
            elif elem.name == 'span':
                fields['name'] = clean_text(elem.get_text())
            elif elem.name == 'i':
                date = self.format_date(elem.get_text()) or date
        return Author(**fields), date

    def format_date(self, text: str) -> Optional[str]:
        """Convert the first DD/MM/YYYY in text to DD.MM.YYYY."""
        match = self.DATE_PATTERN.search(text or "")
        if not match:
            return None
        return '.'.join(match.groups())

    def extract_text(self, card: Tag) -> tuple:
        """
        Return (title, description) of a review.

        The description comes from its own element; older markup without
        one keeps it in the element right after the title.
        """
        title_elem = card.select_one(self.selectors['review_title'])
        title = clean_text(title_elem.get_text()) if title_elem else ""

        desc_elem = card.select_one(self.selectors['review_description'])
        if desc_elem is None and title_elem is not None:
            desc_elem = title_elem.find_next_sibling()
        description = clean_text(desc_elem.get_text()) if desc_elem else ""

        return title, description
