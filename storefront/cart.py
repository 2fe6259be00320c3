"""
Shopping cart for the storefront demo.

A Cart accumulates line items for one customer. It owns no product data:
every availability and price question goes to a catalog object passed in
by the caller, which can be the real ProductService or any stand-in that
satisfies the Catalog protocol.

Design decisions:
- add_product only checks availability; prices are looked up when the
  total is calculated, once per line item
- Each line item remembers the catalog it was validated against, so an
  OrderService can price the cart without being handed a catalog
- A rejected add leaves the item list untouched
"""

import logging
from typing import Optional

from storefront.exceptions import AvailabilityError
from storefront.models import CartItem
from storefront.ports import Catalog

logger = logging.getLogger("cart")


class Cart:
    """
    Line items for one customer, in the order they were added.

    Example:
        cart = Cart(customer_id=1)
        cart.add_product(101, 2, catalog)
        cart.calculate_total(catalog)
    """

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        self._items: list[CartItem] = []
        # parallel to _items
        self._catalogs: list[Catalog] = []

    def __repr__(self) -> str:
        return f"Cart(customer_id={self.customer_id!r}, items={len(self._items)})"

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def catalog(self) -> Optional[Catalog]:
        """The catalog the most recent item was validated against."""
        return self._catalogs[-1] if self._catalogs else None

    def add_product(self, product_id: int, quantity: int, catalog: Catalog) -> bool:
        """
        Add a line item after checking the catalog says the product is available.

        Args:
            product_id: Product to add
            quantity: Number of units (at least 1)
            catalog: Anything with is_product_available / get_product_price

        Returns:
            True once the item has been added

        Raises:
            AvailabilityError: If the catalog reports the product unavailable
            ValueError: If quantity is less than 1
        """
        if not catalog.is_product_available(product_id):
            logger.warning(f"Customer {self.customer_id}: product {product_id} is not available")
            raise AvailabilityError(product_id)

        item = CartItem(product_id=product_id, quantity=quantity)
        self._items.append(item)
        self._catalogs.append(catalog)
        logger.info(f"Customer {self.customer_id}: added {quantity} x product {product_id}")
        return True

    def calculate_total(self, catalog: Optional[Catalog] = None) -> float:
        """
        Sum quantity * unit price over all line items.

        Prices come from ``catalog`` if given, otherwise each item is priced
        against the catalog it was added with. Whatever numeric type the
        catalog returns (float, Decimal) is kept. An empty cart totals 0.
        """
        if not self._items:
            return 0.0

        sources = [catalog] * len(self._items) if catalog is not None else self._catalogs
        return sum(
            item.quantity * source.get_product_price(item.product_id)
            for item, source in zip(self._items, sources)
        )

    def get_item_count(self) -> int:
        """Number of line items (not the number of units)."""
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def contains_product(self, product_id: int) -> bool:
        """Check if a specific product is in this cart."""
        return any(item.product_id == product_id for item in self._items)

    def get_product_ids(self) -> list[int]:
        """Get all product IDs in this cart, in insertion order."""
        return [item.product_id for item in self._items]
