# shop/demo.py
"""Console walk-through of a checkout and of the errors the shop raises.

    python -m shop.demo
"""
import logging

from .checkout import CheckoutService
from .errors import CheckoutError
from .models import Cart, Customer, Product

logger = logging.getLogger(__name__)


def _expect_error(action) -> None:
    try:
        action()
    except CheckoutError as e:
        logger.debug("expected failure: %r", e)
        print(f"Caught expected error: {e}")


def run(service: CheckoutService = None) -> Customer:
    service = service or CheckoutService()

    cheese = Product.shippable("Cheese", 100, 10, weight=0.2)
    biscuits = Product.shippable("Biscuits", 150, 5, weight=0.7)
    scratch_card = Product.simple("Scratch Card", 50, 20)

    customer = Customer("Ali", 1000)

    cart = Cart()
    cart.add(cheese, 2)
    cart.add(biscuits, 1)
    cart.add(scratch_card, 1)

    service.checkout(customer, cart)

    print("\nTesting empty cart:")
    service.checkout(customer, Cart())

    print("\nTesting expired product:")
    expired_cheese = Product.shippable("Expired Cheese", 100, 10, expired=True, weight=0.2)
    cart_with_expired = Cart()

    def checkout_expired():
        cart_with_expired.add(expired_cheese, 1)
        service.checkout(customer, cart_with_expired)

    _expect_error(checkout_expired)

    print("\nTesting out of stock:")
    milk = Product.shippable("Milk", 50, 1, weight=0.1)
    _expect_error(lambda: Cart().add(milk, 2))

    print("\nTesting invalid inputs:")
    _expect_error(lambda: cart.add(None, 1))
    _expect_error(lambda: cart.add(cheese, 0))
    _expect_error(lambda: service.checkout(None, cart))
    _expect_error(lambda: Product.shippable("", 100, 10, weight=0.2))
    _expect_error(lambda: Product.shippable("Invalid", -100, 10, weight=0.2))
    _expect_error(lambda: Product.shippable("Invalid", 100, 10, weight=-0.2))
    _expect_error(lambda: Customer("", 1000))

    return customer


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        run()
    except CheckoutError as e:
        logger.error("demo aborted: %s", e)
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
