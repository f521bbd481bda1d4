# shop/checkout.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional, TextIO

from .config import get_settings
from .errors import InsufficientBalance, InvalidArgument, InvalidState
from .models import ZERO, Cart, Customer, to_decimal

logger = logging.getLogger(__name__)

SHIPMENT_HEADER = "** Shipment notice **"
RECEIPT_HEADER = "** Checkout receipt **"


def _round_half_up(value, exp: Decimal) -> Decimal:
    value = Decimal(value)
    # quantize raises once the result needs more digits than the context holds
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exp.adjusted() + 2)
        return value.quantize(exp, rounding=ROUND_HALF_UP)


def format_whole(value: Decimal) -> str:
    """Zero decimals, rounding half up (the receipt never shows cents)."""
    return str(_round_half_up(value, Decimal("1")))


def format_kg(value: Decimal) -> str:
    return str(_round_half_up(value, Decimal("0.1")))


@dataclass
class ReceiptLine:
    code: str
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    requires_shipping: bool
    weight_grams: Decimal = ZERO


@dataclass
class Receipt:
    customer: str
    lines: List[ReceiptLine]
    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    total_weight: Decimal
    balance_after: Decimal
    text: str = field(default="", repr=False)

    @property
    def shippable_lines(self) -> List[ReceiptLine]:
        return [line for line in self.lines if line.requires_shipping]


def render_shipment_notice(receipt: Receipt) -> List[str]:
    out = [SHIPMENT_HEADER]
    shippable = receipt.shippable_lines
    if not shippable:
        # same wording for an empty cart and a cart with nothing to ship
        out.append("No items in cart")
        return out
    for line in shippable:
        out.append(f"{line.quantity}x {line.name:<12} {format_whole(line.weight_grams)}g")
    out.append(f"Total package weight {format_kg(receipt.total_weight)} kg")
    return out


def render_receipt(receipt: Receipt) -> List[str]:
    out = [RECEIPT_HEADER]
    if not receipt.lines:
        out.append("No items to checkout")
        out += ["Subtotal 0", "Shipping 0", "Amount 0"]
        return out
    for line in receipt.lines:
        out.append(f"{line.quantity}x {line.name:<12} {format_whole(line.line_total)}")
    out.append(f"Subtotal {format_whole(receipt.subtotal)}")
    out.append(f"Shipping {format_whole(receipt.shipping)}")
    out.append(f"Amount {format_whole(receipt.total)}")
    return out


def render(receipt: Receipt) -> str:
    return "\n".join(render_shipment_notice(receipt) + [""] + render_receipt(receipt)) + "\n"


class CheckoutService:
    """Validates a cart, charges the customer and takes the goods out of stock.

    A call runs validate -> compute -> charge -> report -> commit stock, in that
    order. The report text is rendered before the charge and written after it.
    Nothing is mutated until every line has passed validation, and the balance
    is charged before any stock is taken; a failed charge therefore leaves
    stock untouched. Nothing is rolled back after the charge.
    """

    def __init__(self, shipping_fee=None):
        if shipping_fee is None:
            shipping_fee = get_settings().shipping_fee
        self.shipping_fee = to_decimal(shipping_fee, "Shipping fee must be a number")
        if self.shipping_fee < 0:
            raise InvalidArgument("Shipping fee must be non-negative")

    def checkout(self, customer: Customer, cart: Cart, stream: Optional[TextIO] = None) -> Receipt:
        # 1) inputs
        if customer is None:
            raise InvalidArgument("Customer cannot be null")
        if cart is None:
            raise InvalidArgument("Cart cannot be null")

        items = cart.items()

        # 2) every line must still be sellable (stock is re-checked here)
        for item in items:
            product = item.product
            if product.expired:
                logger.warning("checkout rejected for %s: %s is expired", customer.name, product.name)
                raise InvalidState(f"{product.name} is expired")
            if item.quantity > product.quantity:
                logger.warning("checkout rejected for %s: %s out of stock", customer.name, product.name)
                raise InvalidState(f"{product.name} out of stock")

        # 3) totals
        subtotal = cart.subtotal()
        total_weight = cart.total_weight()
        shipping = self.shipping_fee if total_weight > 0 else ZERO
        total = subtotal + shipping

        # 4) render the report, still before any mutation
        receipt = Receipt(
            customer=customer.name,
            lines=[
                ReceiptLine(
                    code=item.product.code,
                    name=item.product.name,
                    quantity=item.quantity,
                    unit_price=item.product.price,
                    line_total=item.line_total,
                    requires_shipping=item.product.requires_shipping(),
                    weight_grams=item.weight * 1000,
                )
                for item in items
            ],
            subtotal=subtotal,
            shipping=shipping,
            total=total,
            total_weight=total_weight,
            balance_after=customer.balance,
        )
        receipt.text = render(receipt)

        # 5) charge (InsufficientBalance propagates, stock still untouched)
        try:
            customer.deduct(total)
        except InsufficientBalance:
            logger.warning("checkout rejected for %s: balance %s < total %s", customer.name, customer.balance, total)
            raise
        receipt.balance_after = customer.balance

        # 6) shipment notice + receipt
        (stream or sys.stdout).write(receipt.text)

        # 7) commit stock, last
        for item in items:
            item.product.reduce_quantity(item.quantity)

        logger.info("checkout ok: customer=%s items=%d total=%s", customer.name, len(items), format_whole(total))
        return receipt


def checkout(customer: Customer, cart: Cart, stream: Optional[TextIO] = None) -> Receipt:
    return CheckoutService().checkout(customer, cart, stream=stream)
