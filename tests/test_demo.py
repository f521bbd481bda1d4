import logging
from decimal import Decimal

from shop.checkout import CheckoutService
from shop.demo import main, run


def test_demo_output(capsys):
    customer = run(CheckoutService(shipping_fee=30))
    out = capsys.readouterr().out

    assert customer.balance == Decimal("570")
    assert "1x Scratch Card 50\n" in out
    assert "Amount 430\n" in out
    assert "No items to checkout\n" in out
    assert "Caught expected error: Expired Cheese is expired\n" in out
    assert "Caught expected error: Quantity exceeds stock for Milk\n" in out
    assert "Caught expected error: Product cannot be null\n" in out
    assert "Caught expected error: Quantity must be positive\n" in out
    assert "Caught expected error: Customer cannot be null\n" in out
    assert "Caught expected error: Name cannot be null or empty\n" in out
    assert "Caught expected error: Price must be non-negative\n" in out
    assert "Caught expected error: Weight must be non-negative\n" in out
    assert "Caught expected error: Customer name cannot be null or empty\n" in out


def test_main_exit_code(capsys):
    assert main() == 0


def test_expected_failures_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="shop.demo"):
        run(CheckoutService(shipping_fee=30))
    assert "expected failure" in caplog.text
