# shop/api/catalog.py
from fastapi import APIRouter, HTTPException, Depends
from typing import List
import logging

from ..errors import CheckoutError
from ..models import Customer, Product
from ..schemas import CustomerIn, CustomerOut, ProductIn, ProductOut
from ..store import NotFound, Store, get_store
from .common import customer_out, http_error, product_out

router = APIRouter(prefix="", tags=["catalog"])
logger = logging.getLogger(__name__)


@router.post("/products", response_model=ProductOut, status_code=201)
def create_product(body: ProductIn, store: Store = Depends(get_store)):
    try:
        p = Product(
            body.name,
            body.price,
            body.quantity,
            body.expired,
            kind=body.kind,
            weight=body.weight,
            code=body.code,
        )
        store.add_product(p)
    except CheckoutError as e:
        raise http_error(e)
    logger.info("product registered: %s (%s)", p.code, p.name)
    return product_out(p)


@router.get("/products", response_model=List[ProductOut])
def list_products(store: Store = Depends(get_store)):
    return [product_out(p) for p in store.list_products()]


@router.get("/products/search", response_model=ProductOut)
def search_product(code: str, store: Store = Depends(get_store)):
    # 1) look the code up
    try:
        p = store.get_product(code)
    except NotFound:
        # 2) unknown code -> 404
        raise HTTPException(status_code=404, detail="Product not found")
    # 3) found -> shape it for the client
    return product_out(p)


@router.post("/customers", response_model=CustomerOut, status_code=201)
def create_customer(body: CustomerIn, store: Store = Depends(get_store)):
    try:
        c = Customer(body.name, body.balance)
    except CheckoutError as e:
        raise http_error(e)
    cid = store.add_customer(c)
    return customer_out(cid, c)


@router.get("/customers/{cid}", response_model=CustomerOut)
def get_customer(cid: str, store: Store = Depends(get_store)):
    try:
        return customer_out(cid, store.get_customer(cid))
    except NotFound as e:
        raise http_error(e)
