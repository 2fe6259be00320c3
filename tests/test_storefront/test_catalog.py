"""
Tests for the product catalog.

These tests verify registration, stock updates, availability and
price lookups, and loading the demo fixture.
"""

import json
import logging
import pytest

from storefront.catalog import ProductService, load_products
from storefront.exceptions import ProductNotFoundError
from storefront.ports import Catalog


class TestProductRegistration:
    """Tests for add_product."""

    def test_add_product(self):
        """Test registering a product."""
        catalog = ProductService()

        product = catalog.add_product(101, "Laptop", 999.99, 10)

        assert product.id == 101
        assert product.name == "Laptop"
        assert product.price == 999.99
        assert product.stock == 10
        assert 101 in catalog
        assert len(catalog) == 1

    def test_add_product_overwrites_existing(self, catalog: ProductService):
        """Test that re-registering an id replaces the entry (last write wins)."""
        catalog.add_product(101, "Gaming Laptop", 1499.00, 2)

        assert len(catalog) == 2
        assert catalog.get_product(101).name == "Gaming Laptop"
        assert catalog.get_product_price(101) == 1499.00

    def test_negative_price_rejected(self):
        """Test that negative prices are rejected."""
        with pytest.raises(ValueError):
            ProductService().add_product(1, "Broken", -1.0, 1)

    def test_registration_is_logged(self, caplog):
        """Test that registering a product logs at INFO."""
        with caplog.at_level(logging.INFO, logger="catalog"):
            ProductService().add_product(7, "Cable", 9.99, 3)

        assert any("Registered product 7" in r.message for r in caplog.records)


class TestStockAndAvailability:
    """Tests for update_stock and is_product_available."""

    def test_in_stock_product_is_available(self, catalog: ProductService):
        """Test that stock > 0 means available."""
        assert catalog.is_product_available(101) is True
        assert catalog.is_product_available(102) is True

    def test_zero_stock_is_unavailable(self, catalog: ProductService):
        """Test that stock == 0 means unavailable."""
        catalog.update_stock(101, 0)

        assert catalog.is_product_available(101) is False

    def test_unregistered_product_is_unavailable(self, catalog: ProductService):
        """Test that unknown ids are simply unavailable."""
        assert catalog.is_product_available(999) is False

    def test_update_stock_returns_updated_product(self, catalog: ProductService):
        """Test that update_stock changes only the stock."""
        updated = catalog.update_stock(102, 42)

        assert updated.stock == 42
        assert updated.price == 29.99
        assert catalog.get_product(102).stock == 42

    def test_update_stock_unknown_product_raises(self, catalog: ProductService):
        """Test that updating an unregistered product fails."""
        with pytest.raises(ProductNotFoundError, match="Product 999 not found"):
            catalog.update_stock(999, 5)

    def test_restock_makes_product_available_again(self, catalog: ProductService):
        """Test going from out of stock back to available."""
        catalog.update_stock(101, 0)
        catalog.update_stock(101, 3)

        assert catalog.is_product_available(101) is True

    def test_availability_matches_product_in_stock(self, catalog: ProductService):
        """Test that availability always agrees with Product.in_stock."""
        catalog.update_stock(102, 0)

        for product in catalog.get_products():
            assert catalog.is_product_available(product.id) is product.in_stock


class TestPriceLookup:
    """Tests for get_product_price."""

    def test_get_price(self, catalog: ProductService):
        """Test that the registered price is returned."""
        assert catalog.get_product_price(101) == 999.99
        assert catalog.get_product_price(102) == 29.99

    def test_price_of_out_of_stock_product(self, catalog: ProductService):
        """Test that price lookups do not depend on stock."""
        catalog.update_stock(102, 0)

        assert catalog.get_product_price(102) == 29.99

    def test_unknown_product_price_raises(self, catalog: ProductService):
        """Test that pricing an unregistered product fails."""
        with pytest.raises(ProductNotFoundError) as exc_info:
            catalog.get_product_price(404)

        assert exc_info.value.product_id == 404
        assert isinstance(exc_info.value, KeyError)

    def test_satisfies_catalog_protocol(self, catalog: ProductService):
        """Test that ProductService can be handed to a Cart."""
        assert isinstance(catalog, Catalog)


class TestLoadProducts:
    """Tests for loading the catalog from a JSON fixture."""

    def test_load_demo_fixture(self, products_path):
        """Test loading the bundled fixture."""
        catalog = load_products(products_path)

        assert len(catalog) == 4
        assert catalog.get_product_price(101) == 999.99
        assert catalog.is_product_available(104) is False

    def test_load_custom_file(self, tmp_path):
        """Test loading a fixture written by the test."""
        path = tmp_path / "products.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Pen", "price": 1.5, "stock": 100},
            {"id": 2, "name": "Ink", "price": 4.0},
        ]))

        catalog = load_products(path)

        assert [p.id for p in catalog.get_products()] == [1, 2]
        assert catalog.get_product(2).stock == 0

    def test_missing_file_gives_empty_catalog(self, tmp_path):
        """Test that a missing fixture yields an empty catalog."""
        catalog = load_products(tmp_path / "nope.json")

        assert len(catalog) == 0
