"""Tests for src/common/config_loader.py"""

import pytest

from src.common import config_loader
from src.common.config_loader import (
    load_config,
    load_currencies,
    load_selectors,
    load_unknown_currency_code,
)


class TestLoadFromConfigFiles:
    """Tests that load real config YAML files from the repo."""

    def test_load_currencies_returns_dict(self):
        currencies = load_currencies()
        assert isinstance(currencies, dict)
        assert currencies["₽"] == "RUB"
        assert currencies["$"] == "USD"
        assert currencies["€"] == "EUR"

    def test_unknown_currency_code(self):
        assert load_unknown_currency_code() == "UNKNOWN"

    def test_load_selectors_has_product(self):
        selectors = load_selectors()
        assert selectors["product"] == ".product"
        assert selectors["reviews"] == ".reviews article"


class TestLoadConfig:
    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config("does_not_exist.yaml")

    def test_empty_file_returns_empty_dict(self, tmp_path, monkeypatch):
        (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
        monkeypatch.setattr(config_loader, "_get_config_dir", lambda: tmp_path)
        assert load_config("empty.yaml") == {}

    def test_missing_section_defaults(self, tmp_path, monkeypatch):
        (tmp_path / "currencies.yaml").write_text("other: 1\n", encoding="utf-8")
        monkeypatch.setattr(config_loader, "_get_config_dir", lambda: tmp_path)
        assert load_currencies() == {}
        assert load_unknown_currency_code() == "UNKNOWN"


class TestPackagedConfig:
    def test_config_ships_inside_package(self):
        config_dir = config_loader._get_config_dir()
        assert config_dir.joinpath("currencies.yaml").is_file()
        assert config_dir.joinpath("selectors.yaml").is_file()

    def test_independent_of_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_currencies()["$"] == "USD"
