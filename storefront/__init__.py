"""
Storefront: a small in-memory shop used to demonstrate mocks and stubs.

This package contains:
- Domain models (Product, CartItem, Order)
- ProductService, the product catalog
- Cart, which validates items against a catalog
- NotificationService, a simulated email and SMS sender
- OrderService, which confirms orders and notifies the customer
"""

from storefront.models import Product, CartItem, Order, OrderStatus
from storefront.exceptions import (
    StorefrontError,
    AvailabilityError,
    EmptyCartError,
    ProductNotFoundError,
)
from storefront.ports import Catalog, Notifier
from storefront.catalog import ProductService, load_products
from storefront.cart import Cart
from storefront.notifications import NotificationService, Channel, SentMessage
from storefront.orders import OrderService

__all__ = [
    "Product",
    "CartItem",
    "Order",
    "OrderStatus",
    "StorefrontError",
    "AvailabilityError",
    "EmptyCartError",
    "ProductNotFoundError",
    "Catalog",
    "Notifier",
    "ProductService",
    "load_products",
    "Cart",
    "NotificationService",
    "Channel",
    "SentMessage",
    "OrderService",
]
