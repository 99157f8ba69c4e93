"""Tests for src/extraction/parsers/reviews_parser.py"""

import pytest
from bs4 import BeautifulSoup

from src.extraction.parsers.reviews_parser import ReviewsParser
from src.models import Author, Review


def make_parser(articles: str) -> ReviewsParser:
    """Create a ReviewsParser for a reviews section with the given cards."""
    html = f'<html><body><section class="reviews">{articles}</section></body></html>'
    return ReviewsParser(BeautifulSoup(html, "lxml"))


def rating_markup(pattern: str) -> str:
    """Build rating stars from a pattern like "11101" (1 = filled)."""
    stars = "".join('<span class="filled"></span>' if c == "1" else "<span></span>" for c in pattern)
    return f'<div class="rating">{stars}</div>'


class TestParseFixture:
    def test_reviews(self, product_page_soup):
        reviews = ReviewsParser(product_page_soup).parse()
        assert reviews == [
            Review(
                author=Author(avatar="https://shop.example.com/avatars/anna.png", name="Анна"),
                rating=3,
                title="Удобные",
                description="Ношу каждый день.",
                date="05.12.2023",
            ),
            Review(
                author=Author(name="Игорь"),
                rating=5,
                title="Отлично",
                description="Рекомендую.",
                date=None,
            ),
        ]


class TestExtractRating:
    @pytest.mark.parametrize("pattern,expected", [
        ("11101", 3),
        ("11111", 5),
        ("01111", 0),
        ("", 0),
        ("1", 1),
    ])
    def test_counts_leading_filled(self, pattern, expected):
        review = make_parser(f"<article>{rating_markup(pattern)}</article>").parse()[0]
        assert review.rating == expected

    def test_extra_classes_still_filled(self):
        html = '<article><div class="rating"><span class="star filled"></span><span class="star"></span></div></article>'
        assert make_parser(html).parse()[0].rating == 1


class TestAuthorAndDate:
    def test_date_reformatted(self):
        html = '<article><div class="author"><i>Posted 05/12/2023 at noon</i></div></article>'
        assert make_parser(html).parse()[0].date == "05.12.2023"

    @pytest.mark.parametrize("text", ["2023-12-05", "5/12/2023", "yesterday"])
    def test_non_matching_date(self, text):
        html = f'<article><div class="author"><i>{text}</i></div></article>'
        assert make_parser(html).parse()[0].date is None

    def test_no_author_block(self):
        review = make_parser("<article><h3 class=\"title\">T</h3></article>").parse()[0]
        assert review.author == Author()
        assert review.date is None

    def test_nested_elements_ignored(self):
        html = '<article><div class="author"><div><span>Deep</span></div></div></article>'
        assert make_parser(html).parse()[0].author == Author()

    def test_format_date_none(self):
        assert make_parser("").format_date(None) is None


class TestTitleAndDescription:
    def test_named_description_preferred(self):
        html = '<article><h3 class="title"> T </h3><p>Sibling</p><p class="description"> Named </p></article>'
        review = make_parser(html).parse()[0]
        assert review.title == "T"
        assert review.description == "Named"

    def test_sibling_fallback(self):
        html = '<article><h3 class="title">T</h3><p> Next </p></article>'
        assert make_parser(html).parse()[0].description == "Next"

    def test_missing_title_and_description(self):
        review = make_parser("<article></article>").parse()[0]
        assert review.title == ""
        assert review.description == ""
