from decimal import Decimal

import pytest

from shop.config import DEFAULT_SHIPPING_FEE, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("SHOP_SHIPPING_FEE", "SHOP_LOG_LEVEL", "SHOP_CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    s = load_settings()
    assert s.shipping_fee == DEFAULT_SHIPPING_FEE == Decimal(30)
    assert s.log_level == "INFO"
    assert s.cors_origins == ("http://localhost:3000", "http://127.0.0.1:3000")


def test_from_environment(monkeypatch):
    monkeypatch.setenv("SHOP_SHIPPING_FEE", "12.5")
    monkeypatch.setenv("SHOP_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHOP_CORS_ORIGINS", "https://a.example, https://b.example,")
    s = load_settings()
    assert s.shipping_fee == Decimal("12.5")
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ("https://a.example", "https://b.example")


@pytest.mark.parametrize("raw", ["abc", "-1", "NaN"])
def test_bad_shipping_fee(monkeypatch, raw):
    monkeypatch.setenv("SHOP_SHIPPING_FEE", raw)
    with pytest.raises(RuntimeError, match="SHOP_SHIPPING_FEE"):
        load_settings()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("SHOP_LOG_LEVEL", "verbose")
    with pytest.raises(RuntimeError, match="SHOP_LOG_LEVEL"):
        load_settings()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("SHOP_LOG_LEVEL", "warning")
    assert load_settings().log_level == "WARNING"
