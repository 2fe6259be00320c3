"""
Scripted checkout used by the CLI and the demo API.

checkout() wires a catalog, a cart and an OrderService together for one
customer; run_checkout_demo() narrates the same flow on the console.
"""

import logging
from pathlib import Path
from typing import Optional

from storefront.cart import Cart
from storefront.catalog import ProductService, load_products
from storefront.exceptions import StorefrontError
from storefront.models import Order
from storefront.notifications import NotificationService
from storefront.orders import OrderService

logger = logging.getLogger("demo")

# (product_id, quantity) pairs used when no order lines are given
DEMO_LINES = [(101, 1), (102, 2)]


def checkout(
    catalog: ProductService,
    notifications: NotificationService,
    customer_id: int,
    email: str,
    phone: str,
    lines: list[tuple[int, int]],
) -> Order:
    """
    Add each (product_id, quantity) line to a fresh cart and place the order.

    Raises:
        AvailabilityError: If any product is unavailable (no order is created)
        EmptyCartError: If ``lines`` is empty
    """
    cart = Cart(customer_id)
    for product_id, quantity in lines:
        cart.add_product(product_id, quantity, catalog)

    order_service = OrderService(notifications)
    return order_service.create_order(cart, email, phone)


def run_checkout_demo(products_path: Optional[Path] = None) -> Optional[Order]:
    """Run the happy-path checkout against the fixture catalog and print the result."""
    print("\n" + "=" * 70)
    print("STOREFRONT DEMO: Checkout")
    print("=" * 70 + "\n")

    catalog = load_products(products_path)
    notifications = NotificationService()

    print("Catalog:")
    for product in catalog.get_products():
        print(f"  {product.id}: {product.name} ${product.price:.2f} (stock {product.stock})")

    print("\n" + "-" * 70)
    print("ACTION: Customer 1 buys " + ", ".join(f"{q} x {p}" for p, q in DEMO_LINES))
    print("-" * 70 + "\n")

    try:
        order = checkout(
            catalog,
            notifications,
            customer_id=1,
            email="customer@example.com",
            phone="+1234567890",
            lines=DEMO_LINES,
        )
    except StorefrontError as e:
        logger.error(f"Checkout failed: {e}")
        print(f"\nCheckout failed: {e}")
        return None

    print("\n" + "-" * 70)
    print(f"RESULT: order {order.order_id} is {order.status}, total ${order.total_amount:.2f}")
    print("-" * 70)

    print("\nNotifications sent:")
    for msg in notifications.messages():
        print(f"  {msg.summary()}")

    return order


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
    )
    run_checkout_demo()
