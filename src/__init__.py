"""
Product Page Parser

Modules:
    models      - Data models (ParsedPage, PageMeta, Product, Offer, Review)
    common      - Shared utilities (config loader, currency codes, text cleanup, logging)
    extraction  - Page extraction logic and section parsers
"""
