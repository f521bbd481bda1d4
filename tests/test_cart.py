from decimal import Decimal

import pytest

from shop.errors import InvalidArgument
from shop.models import Cart, Product


def test_new_cart_is_empty():
    cart = Cart()
    assert cart.is_empty()
    assert len(cart) == 0
    assert cart.subtotal() == 0
    assert cart.total_weight() == 0


def test_add_rejects_missing_product():
    with pytest.raises(InvalidArgument, match="Product cannot be null"):
        Cart().add(None, 1)


@pytest.mark.parametrize("qty", [0, -3])
def test_add_rejects_non_positive_quantity(cheese, qty):
    with pytest.raises(InvalidArgument, match="Quantity must be positive"):
        Cart().add(cheese, qty)


def test_add_rejects_more_than_stock():
    milk = Product.shippable("Milk", 50, 1, weight=0.1)
    cart = Cart()
    with pytest.raises(InvalidArgument, match="Quantity exceeds stock for Milk"):
        cart.add(milk, 2)
    assert cart.is_empty()


def test_repeated_adds_are_merged(cheese):
    cart = Cart()
    cart.add(cheese, 2)
    cart.add(cheese, 3)
    assert len(cart) == 1
    assert cart.quantity_of(cheese) == 5


def test_stock_check_uses_each_call_not_the_running_total(biscuits):
    # stock 5: 4 + 4 is accepted because each call fits on its own
    cart = Cart()
    cart.add(biscuits, 4)
    cart.add(biscuits, 4)
    assert cart.quantity_of(biscuits) == 8


def test_stock_check_uses_stock_at_call_time(cheese):
    cart = Cart()
    cart.add(cheese, 2)
    cheese.reduce_quantity(8)
    with pytest.raises(InvalidArgument):
        cart.add(cheese, 3)
    assert cart.quantity_of(cheese) == 2


def test_items_keep_insertion_order(cheese, biscuits, scratch_card):
    cart = Cart()
    cart.add(scratch_card, 1)
    cart.add(cheese, 2)
    cart.add(biscuits, 1)
    cart.add(scratch_card, 1)
    assert [i.product.name for i in cart.items()] == ["Scratch Card", "Cheese", "Biscuits"]


def test_items_is_a_snapshot(cheese):
    cart = Cart()
    cart.add(cheese, 2)
    cart.items()[0].quantity = 99
    assert cart.quantity_of(cheese) == 2


def test_subtotal_and_weight(cheese, biscuits, scratch_card):
    cart = Cart()
    cart.add(cheese, 2)
    cart.add(biscuits, 1)
    cart.add(scratch_card, 1)
    assert cart.subtotal() == Decimal("400")
    # the scratch card weighs nothing
    assert cart.total_weight() == Decimal("1.1")


def test_same_code_for_two_products_rejected():
    a = Product.simple("Pen", 1, 5, code="SKU-1")
    b = Product.simple("Pencil", 1, 5, code="SKU-1")
    cart = Cart()
    cart.add(a, 1)
    with pytest.raises(InvalidArgument):
        cart.add(b, 1)


def test_clear(cheese):
    cart = Cart()
    cart.add(cheese, 1)
    cart.clear()
    assert cart.is_empty()
