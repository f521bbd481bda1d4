# shop/errors.py


class CheckoutError(Exception):
    """Base for every failure raised by the shop domain."""


class InvalidArgument(CheckoutError, ValueError):
    """Bad constructor or method input."""


class InvalidState(CheckoutError):
    """A cart line cannot be sold right now (expired, out of stock)."""


class InsufficientBalance(CheckoutError):
    """The customer cannot pay the requested amount."""
