# shop/api/purchase.py
from fastapi import APIRouter, HTTPException, Depends
import io
import logging

from ..checkout import CheckoutService
from ..config import get_settings
from ..errors import CheckoutError
from ..schemas import CartItemIn, CartOut, CheckoutIn, CheckoutOut, ReceiptLineOut
from ..store import NotFound, Store, get_store
from .common import cart_out, http_error

router = APIRouter(prefix="", tags=["purchase"])
logger = logging.getLogger(__name__)


def get_checkout_service() -> CheckoutService:
    return CheckoutService(get_settings().shipping_fee)


@router.post("/carts", response_model=CartOut, status_code=201)
def create_cart(store: Store = Depends(get_store)):
    cart_id = store.new_cart()
    return cart_out(cart_id, store.get_cart(cart_id))


@router.get("/carts/{cart_id}", response_model=CartOut)
def get_cart(cart_id: str, store: Store = Depends(get_store)):
    try:
        return cart_out(cart_id, store.get_cart(cart_id))
    except NotFound as e:
        raise http_error(e)


@router.post("/carts/{cart_id}/items", response_model=CartOut)
def add_item(cart_id: str, item: CartItemIn, store: Store = Depends(get_store)):
    try:
        with store.locked():
            cart = store.get_cart(cart_id)
            cart.add(store.get_product(item.code), item.qty)
            return cart_out(cart_id, cart)
    except (NotFound, CheckoutError) as e:
        raise http_error(e)


@router.post("/carts/{cart_id}/checkout", response_model=CheckoutOut)
def checkout_cart(
    cart_id: str,
    req: CheckoutIn,
    store: Store = Depends(get_store),
    service: CheckoutService = Depends(get_checkout_service),
):
    try:
        # 1) resolve cart and customer, then run the whole checkout under the store lock
        with store.locked():
            cart = store.get_cart(cart_id)
            customer = store.get_customer(req.customer_id)

            # 2) the console report is captured and returned with the totals
            buf = io.StringIO()
            receipt = service.checkout(customer, cart, stream=buf)

        # 3) response
        return CheckoutOut(
            customer_id=req.customer_id,
            lines=[
                ReceiptLineOut(
                    code=line.code,
                    name=line.name,
                    qty=line.quantity,
                    unit_price=float(line.unit_price),
                    line_total=float(line.line_total),
                    weight_grams=float(line.weight_grams),
                    requires_shipping=line.requires_shipping,
                )
                for line in receipt.lines
            ],
            subtotal=float(receipt.subtotal),
            shipping=float(receipt.shipping),
            total=float(receipt.total),
            total_weight=float(receipt.total_weight),
            balance=float(receipt.balance_after),
            report=buf.getvalue(),
        )

    except (NotFound, CheckoutError) as e:
        raise http_error(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("checkout failed")
        raise HTTPException(status_code=500, detail=f"Server error: {e.__class__.__name__}: {e}")
