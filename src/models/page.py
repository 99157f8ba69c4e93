"""
Page data models.

Pure data classes for representing information extracted from a product page.
No business logic - only data structure definitions and serialisation.

Attributes are snake_case; to_dict() emits the camelCase keys consumers of
the parse result expect (isLiked, oldPrice, discountPercent) and drops any
field whose value is None, so missing data is absent rather than null.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional


def _camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def to_dict(value: Any) -> Any:
    """
    Convert a model (or list/dict of models) to plain JSON-ready data.

    Args:
        value: Dataclass instance, list, dict or scalar

    Returns:
        Plain Python structure with camelCase keys and None fields omitted
    """
    if is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            result[_camel_case(f.name)] = to_dict(item)
        return result
    if isinstance(value, list):
        return [to_dict(item) for item in value]
    if isinstance(value, dict):
        return {key: to_dict(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class OpenGraph:
    """OpenGraph link-preview fields."""
    title: Optional[str] = None
    image: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class PageMeta:
    """Information from the page head."""
    language: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[List[str]] = None
    opengraph: OpenGraph = field(default_factory=OpenGraph)


@dataclass(frozen=True)
class Photo:
    """Product gallery image."""
    preview: str = ""
    full: str = ""
    alt: str = ""


@dataclass
class Tags:
    """Product tags grouped by their marker class."""
    category: List[str] = field(default_factory=list)
    discount: List[str] = field(default_factory=list)
    label: List[str] = field(default_factory=list)


@dataclass
class Product:
    """
    Product card data.

    Field Groups:
    - Identity: id, name, description (attribute-free markup)
    - Gallery: images (displayed image first), is_liked
    - Pricing: price, old_price, discount, discount_percent, currency.
      All five are None when the price block could not be parsed.
    - Classification: tags, properties
    """
    id: str = ""
    name: str = ""
    description: str = ""
    images: List[Photo] = field(default_factory=list)
    is_liked: bool = False
    tags: Tags = field(default_factory=Tags)
    price: Optional[float] = None
    old_price: Optional[float] = None
    discount: Optional[float] = None
    discount_percent: Optional[str] = None
    currency: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Offer:
    """Suggested product card."""
    image: Optional[str] = None
    name: Optional[str] = None
    price: Optional[str] = None     # Kept as the matched string, e.g. "49.99"
    currency: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Author:
    """Review author."""
    avatar: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Review:
    """Customer review."""
    author: Author = field(default_factory=Author)
    rating: int = 0
    title: str = ""
    description: str = ""
    date: Optional[str] = None      # DD.MM.YYYY


@dataclass
class ParsedPage:
    """Complete parse result for a product page."""
    meta: PageMeta = field(default_factory=PageMeta)
    product: Optional[Product] = None
    suggested: List[Offer] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready parse record."""
        return to_dict(self)
