"""
Currency Codes

Maps the currency glyph printed next to a price to its ISO 4217 code.
The table comes from src/config/currencies.yaml; the built-in table below is
used when that file cannot be loaded.
"""

import logging
from typing import Dict, Optional

from .config_loader import load_currencies, load_unknown_currency_code

logger = logging.getLogger(__name__)

DEFAULT_CURRENCIES: Dict[str, str] = {
    '₽': 'RUB',
    '$': 'USD',
    '€': 'EUR',
}

DEFAULT_UNKNOWN_CODE = 'UNKNOWN'

_currency_map: Optional[Dict[str, str]] = None
_unknown_code: Optional[str] = None


def _load_table() -> None:
    global _currency_map, _unknown_code

    try:
        _currency_map = load_currencies()
        _unknown_code = load_unknown_currency_code()
    except FileNotFoundError as e:
        logger.warning("Using built-in currency table: %s", e)
        _currency_map = dict(DEFAULT_CURRENCIES)
        _unknown_code = DEFAULT_UNKNOWN_CODE


def unknown_currency_code() -> str:
    """Return the configured code for unrecognised glyphs."""
    if _unknown_code is None:
        _load_table()
    return _unknown_code


def get_currency_code(
    symbol: str,
    currencies: Optional[Dict[str, str]] = None,
    unknown_code: str = DEFAULT_UNKNOWN_CODE,
) -> str:
    """
    Return the currency code for a currency glyph.

    Args:
        symbol: Currency glyph (e.g., "₽", "$", "€")
        currencies: Glyph to code mapping. If None, the configured table
            and unknown code are used and unknown_code is ignored.
        unknown_code: Code for glyphs missing from an explicit mapping

    Returns:
        Currency code ("RUB", "USD", "EUR"), or the unknown code
        ("UNKNOWN") for any other glyph

    Example:
        >>> get_currency_code('$')
        'USD'
    """
    if currencies is not None:
        return currencies.get(symbol, unknown_code)

    if _currency_map is None:
        _load_table()
    return _currency_map.get(symbol, _unknown_code)
