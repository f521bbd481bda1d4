# shop/api/common.py
from fastapi import HTTPException

from ..errors import CheckoutError, InsufficientBalance, InvalidArgument, InvalidState
from ..models import Cart, Customer, Product
from ..schemas import CartLineOut, CartOut, CustomerOut, ProductOut
from ..store import NotFound

STATUS_BY_ERROR = [
    (InsufficientBalance, 402),
    (InvalidState, 409),
    (InvalidArgument, 400),
]


def http_error(exc: Exception) -> HTTPException:
    """Domain error -> HTTPException with the error message as detail."""
    if isinstance(exc, NotFound):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, CheckoutError):
        for kind, status in STATUS_BY_ERROR:
            if isinstance(exc, kind):
                return HTTPException(status_code=status, detail=str(exc))
        return HTTPException(status_code=400, detail=str(exc))
    raise TypeError(f"not a shop error: {exc!r}")


def product_out(p: Product) -> ProductOut:
    return ProductOut(
        code=p.code,
        name=p.name,
        price=float(p.price),
        quantity=p.quantity,
        expired=p.expired,
        kind=p.kind,
        weight=float(p.weight),
    )


def customer_out(cid: str, c: Customer) -> CustomerOut:
    return CustomerOut(id=cid, name=c.name, balance=float(c.balance))


def cart_out(cart_id: str, cart: Cart) -> CartOut:
    return CartOut(
        id=cart_id,
        items=[
            CartLineOut(code=i.product.code, name=i.product.name, qty=i.quantity, line_total=float(i.line_total))
            for i in cart.items()
        ],
        subtotal=float(cart.subtotal()),
        total_weight=float(cart.total_weight()),
    )
