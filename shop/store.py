# shop/store.py
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from .errors import InvalidArgument
from .models import Cart, Customer, Product, new_code


class NotFound(KeyError):
    """Unknown product code, customer id or cart id."""

    def __str__(self):
        return str(self.args[0]) if self.args else "not found"


class Store:
    """In-process registry of the objects the API works on.

    Nothing is written anywhere; a restart starts from an empty shop. One
    lock serializes every mutation so that two checkouts can never interleave
    on the same customer, cart or product.
    """

    def __init__(self):
        self.products: Dict[str, Product] = {}
        self.customers: Dict[str, Customer] = {}
        self.carts: Dict[str, Cart] = {}
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["Store"]:
        with self._lock:
            yield self

    # products
    def add_product(self, product: Product) -> Product:
        with self._lock:
            if product.code in self.products:
                raise InvalidArgument(f"Product code already exists: {product.code}")
            self.products[product.code] = product
            return product

    def get_product(self, code: str) -> Product:
        try:
            return self.products[code]
        except KeyError:
            raise NotFound(f"Product not found: {code}") from None

    def list_products(self) -> List[Product]:
        return sorted(self.products.values(), key=lambda p: p.name)

    # customers
    def add_customer(self, customer: Customer) -> str:
        with self._lock:
            cid = new_code("C")
            self.customers[cid] = customer
            return cid

    def get_customer(self, cid: str) -> Customer:
        try:
            return self.customers[cid]
        except KeyError:
            raise NotFound(f"Customer not found: {cid}") from None

    # carts
    def new_cart(self) -> str:
        with self._lock:
            cart_id = new_code("CART")
            self.carts[cart_id] = Cart()
            return cart_id

    def get_cart(self, cart_id: str) -> Cart:
        try:
            return self.carts[cart_id]
        except KeyError:
            raise NotFound(f"Cart not found: {cart_id}") from None


_store = Store()


# FastAPI dependency, overridden in tests with a fresh Store
def get_store():
    yield _store
