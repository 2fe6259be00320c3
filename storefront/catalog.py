"""
In-memory product catalog for the storefront demo.

ProductService is the single authority for whether a product exists,
what it costs, and how many units are left. Carts only ever see it
through the Catalog protocol (storefront.ports).

Design decisions:
- Products are kept in a dict keyed by id; re-registering an id replaces it
- Unknown ids raise ProductNotFoundError on lookups that need a product,
  but availability checks simply answer False
- Demo data can be seeded from a JSON fixture file
"""

import json
import logging
from pathlib import Path
from typing import Optional

from storefront.exceptions import ProductNotFoundError
from storefront.models import Product

logger = logging.getLogger("catalog")

# Fixture used by the CLI and API demos
DEFAULT_PRODUCTS_PATH = Path(__file__).parent.parent / "data" / "products.json"


class ProductService:
    """
    Catalog of products and their stock levels.

    Example:
        catalog = ProductService()
        catalog.add_product(101, "Laptop", 999.99, 10)

        catalog.is_product_available(101)   # True
        catalog.get_product_price(101)      # 999.99
    """

    def __init__(self):
        self._products: dict[int, Product] = {}

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id) -> bool:
        return product_id in self._products

    # =========================================================================
    # Setup Operations
    # =========================================================================

    def add_product(self, product_id: int, name: str, price: float, stock: int) -> Product:
        """
        Register a product, replacing any existing entry with the same id.

        Raises:
            ValueError: If price or stock is negative
        """
        product = Product(id=product_id, name=name, price=price, stock=stock)
        if product_id in self._products:
            logger.info(f"Replacing product {product_id} ({name})")
        else:
            logger.info(f"Registered product {product_id} ({name}) at ${price:.2f}, stock {stock}")
        self._products[product_id] = product
        return product

    def update_stock(self, product_id: int, new_stock: int) -> Product:
        """
        Set the stock level of a registered product.

        Raises:
            ProductNotFoundError: If the product is not registered
        """
        product = self._products.get(product_id)
        if product is None:
            logger.warning(f"Cannot update stock, product not found: {product_id}")
            raise ProductNotFoundError(product_id)

        updated = product.model_copy(update={"stock": new_stock})
        self._products[product_id] = updated
        logger.info(f"Stock for product {product_id}: {product.stock} -> {new_stock}")
        return updated

    # =========================================================================
    # Catalog Queries
    # =========================================================================

    def is_product_available(self, product_id: int) -> bool:
        """True iff the product is registered and has stock greater than zero."""
        product = self._products.get(product_id)
        return product is not None and product.in_stock

    def get_product_price(self, product_id: int) -> float:
        """
        Get the registered unit price of a product.

        Raises:
            ProductNotFoundError: If the product is not registered
        """
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product.price

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by id, or None."""
        return self._products.get(product_id)

    def get_products(self) -> list[Product]:
        """All registered products in registration order."""
        return list(self._products.values())


def load_products(path: Optional[Path] = None) -> ProductService:
    """
    Build a catalog from a JSON fixture file.

    The file holds a list of ``{"id", "name", "price", "stock"}`` objects.
    A missing file gives an empty catalog.
    """
    filepath = Path(path) if path is not None else DEFAULT_PRODUCTS_PATH
    catalog = ProductService()
    if not filepath.exists():
        logger.warning(f"Product fixture not found: {filepath}")
        return catalog

    with open(filepath, "r") as f:
        data = json.load(f)

    for entry in data:
        catalog.add_product(entry["id"], entry["name"], entry["price"], entry.get("stock", 0))
    return catalog
