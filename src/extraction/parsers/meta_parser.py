"""
Meta Parser

Extracts page metadata from the document head:
- Title (text before the em-dash site suffix)
- Description and keywords from <meta name="...">
- OpenGraph title, image and type from <meta property="og:...">
- Language from the <html lang> attribute

Missing elements leave the corresponding field as None.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from ...common.text_utils import split_title
from ...models import OpenGraph, PageMeta

logger = logging.getLogger(__name__)


class MetaParser:
    """
    Parses metadata from the document head.

    Usage:
        parser = MetaParser(soup)
        meta = parser.parse()
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def parse(self) -> PageMeta:
        """
        Walk the immediate children of <head> once.

        Returns:
            PageMeta with every field found on the page
        """
        title = None
        description = None
        keywords = None
        og = {}

        head = self.soup.find('head')
        if head is None:
            logger.debug("Document has no <head>")
            return PageMeta(language=self.extract_language())

        for elem in head.find_all(recursive=False):
            if elem.name == 'title':
                title = split_title(elem.get_text())
            elif elem.name == 'meta':
                content = elem.get('content', '')
                name = elem.get('name')
                if name == 'description':
                    description = content
                elif name == 'keywords':
                    keywords = self._split_keywords(content)

                prop = elem.get('property')
                if prop == 'og:title':
                    og['title'] = split_title(content)
                elif prop == 'og:image':
                    og['image'] = content
                elif prop == 'og:type':
                    og['type'] = content

        return PageMeta(
            language=self.extract_language(),
            title=title,
            description=description,
            keywords=keywords,
            opengraph=OpenGraph(**og),
        )

    def extract_language(self) -> Optional[str]:
        """Return the <html lang> attribute, or None."""
        html = self.soup.find('html')
        if html is None:
            return None
        return html.get('lang')

    def _split_keywords(self, content: str) -> List[str]:
        return [value.strip() for value in content.split(',')]
