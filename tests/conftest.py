"""
Shared pytest fixtures for the storefront tests.

These fixtures provide a fresh catalog, cart and notification service
for every test, plus the mock and stub collaborators used to test
Cart and OrderService in isolation.
"""

import pytest
from pathlib import Path
from unittest.mock import Mock, create_autospec

from storefront.cart import Cart
from storefront.catalog import ProductService
from storefront.notifications import NotificationService


@pytest.fixture
def products_path() -> Path:
    """Path to the demo product fixture."""
    return Path(__file__).parent.parent / "data" / "products.json"


@pytest.fixture
def catalog() -> ProductService:
    """
    Real catalog with a laptop and a mouse.

    101: Laptop, $999.99, 10 in stock
    102: Mouse,  $29.99,  5 in stock
    """
    service = ProductService()
    service.add_product(101, "Laptop", 999.99, 10)
    service.add_product(102, "Mouse", 29.99, 5)
    return service


@pytest.fixture
def cart() -> Cart:
    """Empty cart for customer 1."""
    return Cart(1)


@pytest.fixture
def notifications() -> NotificationService:
    """Real NotificationService that always delivers."""
    return NotificationService(email_fail_rate=0.0, sms_fail_rate=0.0)


# =============================================================================
# Test Doubles
# =============================================================================

@pytest.fixture
def mock_notifier() -> Mock:
    """Mock notifier whose sends always succeed; records every call."""
    notifier = create_autospec(NotificationService, instance=True)
    notifier.send_email.return_value = True
    notifier.send_sms.return_value = True
    return notifier


@pytest.fixture
def unavailable_catalog() -> Mock:
    """Stub catalog that reports every product as out of stock."""
    stub = Mock(spec=["is_product_available", "get_product_price"])
    stub.is_product_available.return_value = False
    stub.get_product_price.return_value = 99.99
    return stub
