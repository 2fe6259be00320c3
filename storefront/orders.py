"""
Order placement for the storefront demo.

OrderService turns a non-empty cart into a confirmed order and tells the
customer about it by email and SMS.

Flow for create_order:
1. Reject an empty cart (before anything is sent)
2. Price the cart
3. Build a confirmed Order with a fresh id
4. Send the confirmation email, then the confirmation SMS
"""

import logging
from typing import Optional

from storefront.cart import Cart
from storefront.exceptions import EmptyCartError
from storefront.models import Order, OrderStatus
from storefront.ports import Catalog, Notifier
from storefront.templates import ORDER_CONFIRMATION, format_item_list

logger = logging.getLogger("orders")


class OrderService:
    """
    Creates orders and sends the confirmation messages.

    Example:
        service = OrderService(NotificationService())
        order = service.create_order(cart, "customer@example.com", "+1234567890")
    """

    def __init__(self, notification_service: Notifier, catalog: Optional[Catalog] = None):
        """
        Args:
            notification_service: Anything with send_email / send_sms
            catalog: Catalog used to price carts. When omitted, each cart is
                priced against the catalog its items were validated with.
        """
        self.notification_service = notification_service
        self.catalog = catalog
        self.orders: list[Order] = []

    def create_order(self, cart: Cart, email: str, phone: str) -> Order:
        """
        Create a confirmed order from the cart and notify the customer.

        Raises:
            EmptyCartError: If the cart has no line items. Nothing is sent.
        """
        if cart.get_item_count() == 0:
            logger.warning(f"Customer {cart.customer_id}: refusing to create order from empty cart")
            raise EmptyCartError()

        total = cart.calculate_total(self.catalog)
        order = Order(
            customer_id=cart.customer_id,
            status=OrderStatus.CONFIRMED,
            email=email,
            phone=phone,
            total_amount=total,
            items=list(cart.items),
        )
        self.orders.append(order)
        logger.info(f"Order {order.order_id} confirmed for customer {cart.customer_id}: ${total:.2f}")

        self._send_confirmation(order)
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get a previously created order by id."""
        for order in self.orders:
            if order.order_id == order_id:
                return order
        return None

    def _send_confirmation(self, order: Order) -> None:
        """Send the confirmation email, then the SMS. Failures are logged only."""
        context = {
            "order_id": order.order_id,
            "total_amount": order.total_amount,
            "item_list": format_item_list(order.items),
        }

        subject, body = ORDER_CONFIRMATION.render_email(**context)
        if not self.notification_service.send_email(order.email, subject, body):
            logger.warning(f"Order {order.order_id}: confirmation email to {order.email} failed")

        sms_body = ORDER_CONFIRMATION.render_sms(**context)
        if not self.notification_service.send_sms(order.phone, sms_body):
            logger.warning(f"Order {order.order_id}: confirmation SMS to {order.phone} failed")
