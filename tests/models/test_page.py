"""Tests for src/models/page.py"""

import dataclasses

import pytest

from src.models import Offer, OpenGraph, PageMeta, ParsedPage, Photo, Product, Review, to_dict


class TestDefaults:
    def test_product_defaults(self):
        product = Product()
        assert product.images == []
        assert product.properties == {}
        assert product.tags.category == []
        assert product.is_liked is False
        assert product.price is None
        assert product.discount_percent is None

    def test_parsed_page_defaults(self):
        page = ParsedPage()
        assert page.product is None
        assert page.suggested == []
        assert page.reviews == []
        assert page.meta.opengraph == OpenGraph()

    def test_value_objects_are_frozen(self):
        photo = Photo(preview="a", full="b", alt="c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            photo.full = "x"


class TestToDict:
    def test_camel_case_keys(self, full_page):
        product = full_page.to_dict()["product"]
        assert product["isLiked"] is True
        assert product["oldPrice"] == 100.0
        assert product["discountPercent"] == "20.00%"
        assert "old_price" not in product

    def test_none_fields_are_omitted(self):
        data = to_dict(PageMeta(language="en"))
        assert data == {"language": "en", "opengraph": {}}

    def test_missing_product_is_omitted(self):
        data = ParsedPage().to_dict()
        assert "product" not in data
        assert data["suggested"] == []
        assert data["reviews"] == []

    def test_failed_price_fields_absent(self, minimal_page):
        product = minimal_page.to_dict()["product"]
        for key in ("price", "oldPrice", "discount", "discountPercent", "currency"):
            assert key not in product

    def test_properties_keys_untouched(self):
        data = to_dict(Product(properties={"screen_size": "6 in"}))
        assert data["properties"] == {"screen_size": "6 in"}

    def test_nested_lists(self, full_page):
        data = full_page.to_dict()
        assert data["suggested"] == [{"name": "Socks", "price": "9.50", "currency": "USD"}]
        assert data["reviews"][0]["author"] == {"name": "Ann"}
        assert data["reviews"][0]["date"] == "05.12.2023"

    def test_offer_all_absent(self):
        assert to_dict(Offer()) == {}

    def test_review_keeps_empty_strings(self):
        data = to_dict(Review())
        assert data == {"author": {}, "rating": 0, "title": "", "description": ""}
