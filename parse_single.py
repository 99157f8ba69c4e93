#!/usr/bin/env python3
"""
Single Page Extraction

Parses a saved product page with a detailed extraction report.

Usage:
    python3 parse_single.py --file saved/product.html
    python3 parse_single.py --file saved/product.html --verbose
    python3 parse_single.py --file saved/product.html --stdout > product.json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from src.common import setup_logging
from src.extraction import PageExtractor, PageValidator
from src.models import ParsedPage

logger = logging.getLogger("src.parse_single")


def print_report(page: ParsedPage, validation: dict, source: str = ""):
    """Print detailed extraction report."""

    print("\n" + "="*80)
    print("EXTRACTION REPORT")
    print("="*80)

    print(f"\nSource: {source}")

    meta = page.meta
    print("\n" + "-"*80)
    print("META")
    print("-"*80)
    fields = [
        ("Title", meta.title),
        ("Language", meta.language),
        ("Description", meta.description),
        ("Keywords", ", ".join(meta.keywords) if meta.keywords else None),
        ("OG title", meta.opengraph.title),
        ("OG image", meta.opengraph.image),
        ("OG type", meta.opengraph.type),
    ]
    for label, value in fields:
        status = "OK" if value else "MISSING"
        print(f"  [{status:7}] {label:20} {value or 'MISSING'}")

    print("\n" + "-"*80)
    print("PRODUCT")
    print("-"*80)

    product = page.product
    if product is None:
        print("\n  No product container found")
    else:
        price = f"{product.price} {product.currency}" if product.price is not None else ""
        old_price = f"{product.old_price} {product.currency}" if product.old_price is not None else ""
        discount = f"{product.discount} ({product.discount_percent})" if product.discount is not None else ""
        fields = [
            ("ID", product.id),
            ("Name", product.name),
            ("Price", price),
            ("Old price", old_price),
            ("Discount", discount),
            ("Liked", "yes" if product.is_liked else "no"),
        ]
        for label, value in fields:
            status = "OK" if value else "MISSING"
            print(f"  [{status:7}] {label:20} {value or 'MISSING'}")

        print(f"\nIMAGES ({len(product.images)} images):")
        for idx, img in enumerate(product.images, 1):
            url_short = img.full.split('/')[-1] if '/' in img.full else img.full
            print(f"  {idx}. {url_short}")

        print("\nTAGS:")
        for bucket in ("category", "label", "discount"):
            values = getattr(product.tags, bucket)
            print(f"  {bucket:10} {', '.join(values) if values else '-'}")

        print(f"\nPROPERTIES ({len(product.properties)} items):")
        for key, value in product.properties.items():
            print(f"  {key}: {value}")

        print(f"\nDESCRIPTION: {len(product.description)} characters")

    print(f"\nSUGGESTED ({len(page.suggested)} offers):")
    for idx, offer in enumerate(page.suggested, 1):
        price = f"{offer.price} {offer.currency}" if offer.price else "no price"
        print(f"  {idx}. {offer.name or '?'} - {price}")

    print(f"\nREVIEWS ({len(page.reviews)} reviews):")
    for idx, review in enumerate(page.reviews, 1):
        print(f"  {idx}. [{review.rating}/5] {review.title} - {review.author.name or '?'} {review.date or ''}")

    # Validation results
    print("\n" + "-"*80)
    print("COMPLETENESS")
    print("-"*80)

    print(f"\n  Completeness: {validation['completeness']}")

    if validation["missing_fields"]:
        print("\nMISSING REQUIRED FIELDS:")
        for field in validation["missing_fields"]:
            print(f"  - {field}")

    if validation["warnings"]:
        print("\nWARNINGS:")
        for warning in validation["warnings"]:
            print(f"  - {warning}")

    if not validation["missing_fields"] and not validation["warnings"]:
        print("\nNo issues found!")

    print("\n" + "="*80)


def main():
    parser = argparse.ArgumentParser(
        description="Parse a saved product page with an extraction report"
    )
    parser.add_argument(
        "--file",
        required=True,
        help="Saved page HTML file"
    )
    parser.add_argument(
        "--output-json",
        help="Output JSON path (default: output/{stem}/extraction.json)"
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the parse result as JSON instead of the report"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging and the full parse result"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet or args.stdout)

    source = Path(args.file)
    output_json = args.output_json or f"output/{source.stem}/extraction.json"

    try:
        html = source.read_text(encoding="utf-8")
        if not html.strip():
            raise ValueError(f"Empty page file: {source}")

        extractor = PageExtractor()
        extractor.load_html(html)
        page = extractor.extract()

        validation = PageValidator(page).validate()
        result = page.to_dict()

        if args.stdout:
            print(json.dumps(result, indent=2, ensure_ascii=False))
            sys.exit(0 if validation["overall_valid"] else 1)

        print_report(page, validation, str(source))

        output_data = {
            "source": str(source),
            "page": result,
            "validation": validation,
        }

        os.makedirs(os.path.dirname(output_json) or ".", exist_ok=True)
        with open(output_json, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)

        print(f"\nResults saved to: {output_json}")

        if args.verbose:
            print("\n" + "="*80)
            print("FULL PARSE RESULT (JSON)")
            print("="*80)
            print(json.dumps(result, indent=2, ensure_ascii=False))

        sys.exit(0 if validation["overall_valid"] else 1)

    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
