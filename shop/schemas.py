# shop/schemas.py
from pydantic import BaseModel
from typing import List, Optional

from .models import ProductKind


# input side (what the front end sends)
class ProductIn(BaseModel):
    name: str
    price: float
    quantity: int
    expired: bool = False
    kind: ProductKind = ProductKind.SIMPLE
    weight: float = 0  # kg, shippable only
    code: Optional[str] = None


class CustomerIn(BaseModel):
    name: str
    balance: float


class CartItemIn(BaseModel):
    code: str
    qty: int = 1


class CheckoutIn(BaseModel):
    customer_id: str


# output side
class ProductOut(BaseModel):
    code: str
    name: str
    price: float
    quantity: int
    expired: bool
    kind: ProductKind
    weight: float


class CustomerOut(BaseModel):
    id: str
    name: str
    balance: float


class CartLineOut(BaseModel):
    code: str
    name: str
    qty: int
    line_total: float


class CartOut(BaseModel):
    id: str
    items: List[CartLineOut]
    subtotal: float
    total_weight: float


class ReceiptLineOut(BaseModel):
    code: str
    name: str
    qty: int
    unit_price: float
    line_total: float
    weight_grams: float
    requires_shipping: bool


class CheckoutOut(BaseModel):
    customer_id: str
    lines: List[ReceiptLineOut]
    subtotal: float
    shipping: float
    total: float
    total_weight: float
    balance: float
    report: str
