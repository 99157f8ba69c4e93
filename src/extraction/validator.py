"""
Extraction Validator

Checks a parsed page for missing data. Markup deviations never raise
during extraction, so this report is where they become visible.
"""

from __future__ import annotations

from ..common.currency import unknown_currency_code
from ..models import ParsedPage

# Fields that make a product record usable
REQUIRED_FIELDS = ("id", "name", "images")

# Fields expected on a complete page
PREFERRED_FIELDS = ("price", "currency", "description", "properties", "meta_title", "language")


class PageValidator:
    """Validates extraction completeness of a parsed page."""

    def __init__(self, page: ParsedPage, unknown_currency: str | None = None):
        self.page = page
        self.unknown_currency = unknown_currency or unknown_currency_code()

    def validate(self) -> dict:
        """
        Run all validations.

        Returns a dict with keys:
          overall_valid  - False if the product or any required field is missing
          field_checks   - presence booleans for required/preferred fields
          completeness   - percentage of required + preferred fields present
          missing_fields - list of required field names that are absent
          warnings       - list of warning messages
        """
        warnings: list[str] = []
        page = self.page
        product = page.product

        if product is None:
            return {
                "overall_valid": False,
                "field_checks": {},
                "completeness": "0.0%",
                "missing_fields": ["product"],
                "warnings": ["product: container not found on page"],
            }

        checks = {
            "id": bool(product.id),
            "name": bool(product.name),
            "images": bool(product.images),
            "price": product.price is not None,
            "currency": product.currency is not None,
            "description": bool(product.description),
            "properties": bool(product.properties),
            "meta_title": bool(page.meta.title),
            "language": bool(page.meta.language),
        }

        missing_fields = [name for name in REQUIRED_FIELDS if not checks[name]]

        # ── Warnings ─────────────────────────────────────────────────────────

        if product.price is None:
            warnings.append("price: price block missing or not in '<glyph><price><span><glyph><old></span>' form")
        elif product.currency == self.unknown_currency:
            warnings.append("price: unrecognised currency glyph")

        if product.old_price is not None and product.old_price < product.price:
            warnings.append(f"price: old price {product.old_price} below current price {product.price}")

        if not page.meta.title:
            warnings.append("meta: page title missing")

        for idx, offer in enumerate(page.suggested, 1):
            if offer.price is None:
                warnings.append(f"suggested[{idx}]: no price")
            elif offer.currency == self.unknown_currency:
                warnings.append(f"suggested[{idx}]: unrecognised currency glyph")

        for idx, review in enumerate(page.reviews, 1):
            if review.rating == 0:
                warnings.append(f"reviews[{idx}]: zero rating")
            if not review.title:
                warnings.append(f"reviews[{idx}]: no title")

        present = sum(1 for name in REQUIRED_FIELDS + PREFERRED_FIELDS if checks[name])
        total = len(REQUIRED_FIELDS) + len(PREFERRED_FIELDS)

        return {
            "overall_valid": not missing_fields,
            "field_checks": checks,
            "completeness": f"{100 * present / total:.1f}%",
            "missing_fields": missing_fields,
            "warnings": warnings,
        }
