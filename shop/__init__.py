# shop/__init__.py
from .errors import CheckoutError, InsufficientBalance, InvalidArgument, InvalidState
from .models import Cart, CartItem, Customer, Product, ProductKind
from .checkout import CheckoutService, Receipt, ReceiptLine, checkout

__all__ = [
    "Cart",
    "CartItem",
    "CheckoutError",
    "CheckoutService",
    "Customer",
    "InsufficientBalance",
    "InvalidArgument",
    "InvalidState",
    "Product",
    "ProductKind",
    "Receipt",
    "ReceiptLine",
    "checkout",
]
