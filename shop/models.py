# shop/models.py
from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Optional

from .errors import InsufficientBalance, InvalidArgument

ZERO = Decimal(0)


def new_code(prefix: str = "P") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def to_decimal(value, message: str) -> Decimal:
    # float goes through str so 0.2 stays 0.2
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(message)
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidArgument(message) from None
    if not d.is_finite():
        raise InvalidArgument(message)
    return d


def _check_name(name, message: str) -> str:
    if name is None or not isinstance(name, str) or not name.strip():
        raise InvalidArgument(message)
    return name


def _check_count(value, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(message)
    return value


class ProductKind(str, Enum):
    SIMPLE = "simple"
    SHIPPABLE = "shippable"


class Product:
    """A sellable product.

    The two variants of the catalogue are told apart by ``kind`` rather than by
    subclassing: a shippable product carries a per-unit weight in kg, a simple
    one (scratch cards, vouchers) weighs nothing and never ships.
    Stock (``quantity``) is the only attribute that changes after creation.
    """

    def __init__(
        self,
        name: str,
        price,
        quantity: int,
        expired: bool = False,
        *,
        kind: ProductKind = ProductKind.SIMPLE,
        weight=0,
        code: Optional[str] = None,
    ):
        self.name = _check_name(name, "Name cannot be null or empty")

        self.price = to_decimal(price, "Price must be a number")
        if self.price < 0:
            raise InvalidArgument("Price must be non-negative")

        _check_count(quantity, "Quantity must be an integer")
        if quantity < 0:
            raise InvalidArgument("Quantity must be non-negative")
        self.quantity = quantity

        self.expired = bool(expired)
        try:
            self.kind = ProductKind(kind)
        except ValueError:
            raise InvalidArgument(f"Unknown product kind: {kind!r}") from None

        w = to_decimal(weight, "Weight must be a number")
        if w < 0:
            raise InvalidArgument("Weight must be non-negative")
        if self.kind is ProductKind.SIMPLE and w != 0:
            raise InvalidArgument("Only shippable products carry a weight")
        self.weight = w

        self.code = code or new_code()

    @classmethod
    def simple(cls, name, price, quantity, expired=False, code=None) -> "Product":
        return cls(name, price, quantity, expired, kind=ProductKind.SIMPLE, code=code)

    @classmethod
    def shippable(cls, name, price, quantity, expired=False, weight=0, code=None) -> "Product":
        return cls(name, price, quantity, expired, kind=ProductKind.SHIPPABLE, weight=weight, code=code)

    def requires_shipping(self) -> bool:
        return self.kind is ProductKind.SHIPPABLE

    def shipping_weight(self, quantity: int) -> Decimal:
        if not self.requires_shipping():
            return ZERO
        return self.weight * quantity

    def reduce_quantity(self, amount: int) -> None:
        _check_count(amount, "Amount must be an integer")
        if amount < 0:
            raise InvalidArgument("Amount must be non-negative")
        if amount > self.quantity:
            raise InvalidArgument(f"Not enough stock for {self.name}")
        self.quantity -= amount

    def __repr__(self):
        return f"Product({self.code!r}, {self.name!r}, {self.kind.value}, stock={self.quantity})"


class Customer:
    def __init__(self, name: str, balance):
        self.name = _check_name(name, "Customer name cannot be null or empty")
        self.balance = to_decimal(balance, "Balance must be a number")
        if self.balance < 0:
            raise InvalidArgument("Balance must be non-negative")

    def deduct(self, amount) -> None:
        amount = to_decimal(amount, "Amount must be a number")
        if amount < 0:
            raise InvalidArgument("Amount must be non-negative")
        if amount > self.balance:
            raise InsufficientBalance(f"Insufficient balance for customer {self.name}")
        self.balance -= amount

    def __repr__(self):
        return f"Customer({self.name!r}, balance={self.balance})"


@dataclass
class CartItem:
    """One line of a cart: a product and how many of it were requested."""

    product: Product
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity

    @property
    def weight(self) -> Decimal:
        return self.product.shipping_weight(self.quantity)


class Cart:
    """Line items keyed by product code, kept in the order they were first added."""

    def __init__(self):
        self._items: Dict[str, CartItem] = {}

    def add(self, product: Product, quantity: int) -> None:
        if product is None:
            raise InvalidArgument("Product cannot be null")
        _check_count(quantity, "Quantity must be an integer")
        if quantity <= 0:
            raise InvalidArgument("Quantity must be positive")
        # only this call's quantity is checked, not the merged total
        if quantity > product.quantity:
            raise InvalidArgument(f"Quantity exceeds stock for {product.name}")

        item = self._items.get(product.code)
        if item is None:
            self._items[product.code] = CartItem(product, quantity)
            return
        if item.product is not product:
            raise InvalidArgument(f"Product code {product.code} already used by {item.product.name}")
        item.quantity += quantity

    def items(self) -> List[CartItem]:
        return [CartItem(i.product, i.quantity) for i in self._items.values()]

    def quantity_of(self, product: Product) -> int:
        item = self._items.get(product.code)
        return item.quantity if item else 0

    def subtotal(self) -> Decimal:
        return sum((i.line_total for i in self._items.values()), ZERO)

    def total_weight(self) -> Decimal:
        return sum((i.weight for i in self._items.values()), ZERO)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self):
        return len(self._items)
