"""Shared test fixtures."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from src.models import Author, Offer, PageMeta, ParsedPage, Photo, Product, Review, Tags

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def product_page_html():
    """Load the product page HTML fixture."""
    return (FIXTURES_DIR / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def product_page_soup(product_page_html):
    """Parsed product page fixture."""
    return BeautifulSoup(product_page_html, "lxml")


@pytest.fixture
def minimal_page():
    """Parsed page with only the required product fields."""
    return ParsedPage(
        product=Product(
            id="p-1",
            name="Test Product",
            images=[Photo(preview="https://shop.example.com/1-s.jpg", full="https://shop.example.com/1.jpg")],
        ),
    )


@pytest.fixture
def full_page():
    """Fully populated parsed page."""
    return ParsedPage(
        meta=PageMeta(language="ru", title="Test Product", description="About"),
        product=Product(
            id="p-2",
            name="Test Product",
            description="<p>Text</p>",
            images=[Photo(preview="https://shop.example.com/1-s.jpg", full="https://shop.example.com/1.jpg", alt="Front")],
            is_liked=True,
            tags=Tags(category=["Shoes"]),
            price=80.0,
            old_price=100.0,
            discount=20.0,
            discount_percent="20.00%",
            currency="USD",
            properties={"Color": "Blue"},
        ),
        suggested=[Offer(name="Socks", price="9.50", currency="USD")],
        reviews=[Review(author=Author(name="Ann"), rating=5, title="Great", description="Nice", date="05.12.2023")],
    )
