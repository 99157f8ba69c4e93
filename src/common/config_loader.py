"""
Configuration Loader

Loads the YAML files shipped in the src/config package directory:
currency codes and the structural selectors of the product page.
"""

from importlib import resources
from typing import Any, Dict

import yaml

CONFIG_PACKAGE = 'src'
CONFIG_SUBDIR = 'config'


def _get_config_dir():
    """
    Locate the packaged config directory.

    Returns:
        Traversable for src/config (a plain directory in source checkouts
        and regular installs alike)

    Raises:
        FileNotFoundError: If the package was installed without its YAML files
    """
    config_dir = resources.files(CONFIG_PACKAGE).joinpath(CONFIG_SUBDIR)
    if not config_dir.is_dir():
        raise FileNotFoundError(f"Packaged config directory missing: {config_dir}")
    return config_dir


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'currencies.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_file = _get_config_dir().joinpath(filename)

    if not config_file.is_file():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    return yaml.safe_load(config_file.read_text(encoding='utf-8')) or {}


def load_currencies() -> Dict[str, str]:
    """
    Load currency glyph mapping.

    Returns:
        Dictionary mapping currency glyph to currency code

    Example:
        {'₽': 'RUB', '$': 'USD', '€': 'EUR'}
    """
    config = load_config('currencies.yaml')
    return config.get('currencies', {})


def load_unknown_currency_code() -> str:
    """Load the code returned for unrecognised currency glyphs."""
    config = load_config('currencies.yaml')
    return config.get('unknown_code', 'UNKNOWN')


def load_selectors() -> Dict[str, str]:
    """
    Load selector overrides for the page structure.

    Returns:
        Dictionary mapping selector name to CSS selector

    Example:
        {'product': '.product', 'price': '.price', ...}
    """
    config = load_config('selectors.yaml')
    return config.get('selectors', {})
