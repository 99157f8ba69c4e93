# Common utilities
from .config_loader import (
    load_config,
    load_currencies,
    load_selectors,
    load_unknown_currency_code,
)
from .currency import get_currency_code, unknown_currency_code
from .log_config import setup_logging
from .text_utils import clean_text, split_title, strip_tag_attributes
