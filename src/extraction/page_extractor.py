"""
Page Extractor

Extracts meta, product, suggested offers and reviews from a loaded
product page document.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..common.config_loader import load_selectors
from ..models import ParsedPage
from .parsers import MetaParser, ProductParser, ReviewsParser, SuggestedParser

logger = logging.getLogger(__name__)


class PageExtractor:
    """Extracts product page data from an already loaded document."""

    _shared_selectors = None

    def __init__(
        self,
        soup: BeautifulSoup | None = None,
        selectors: dict | None = None,
    ):
        self.soup = soup
        self.html = None

        if selectors is None:
            if PageExtractor._shared_selectors is None:
                PageExtractor._shared_selectors = self._load_selectors()
            selectors = PageExtractor._shared_selectors
        self.selectors = selectors

    @staticmethod
    def _load_selectors() -> dict:
        """Selector overrides from config; parser defaults if config is missing."""
        try:
            return load_selectors()
        except FileNotFoundError as e:
            logger.warning("Using default selectors: %s", e)
            return {}

    def load_html(self, html: str) -> None:
        """Load saved page HTML for extraction."""
        self.html = html
        self.soup = BeautifulSoup(self.html, "lxml")

    def extract(self) -> ParsedPage:
        """Extract all page sections."""
        if self.soup is None:
            raise ValueError("No document loaded (pass a soup or call load_html first)")

        page = ParsedPage(
            meta=MetaParser(self.soup).parse(),
            product=ProductParser(self.soup, self.selectors).parse(),
            suggested=SuggestedParser(self.soup, self.selectors).parse(),
            reviews=ReviewsParser(self.soup, self.selectors).parse(),
        )

        logger.info(
            "Extracted %s: %d images, %d offers, %d reviews",
            page.product.id if page.product else "no product",
            len(page.product.images) if page.product else 0,
            len(page.suggested),
            len(page.reviews),
        )
        return page


def parse_page(document: BeautifulSoup) -> ParsedPage:
    """
    Parse a loaded product page.

    Args:
        document: BeautifulSoup tree of the page

    Returns:
        ParsedPage; call to_dict() for the plain record
    """
    return PageExtractor(document).extract()


def parse_html(html: str) -> ParsedPage:
    """Parse product page HTML source."""
    extractor = PageExtractor()
    extractor.load_html(html)
    return extractor.extract()
