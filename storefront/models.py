"""
Domain models for the storefront demo.

These models describe the handful of entities the checkout flow works with:
products in the catalog, line items in a cart, and confirmed orders.

Design decisions:
- Using Pydantic for validation and serialization
- Price and stock bounds are enforced by Field constraints
- CartItem and Order are frozen - they never change after creation
- Cart is NOT a model here; it is a service object in storefront.cart
  because it holds a reference to the catalog it validated against
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4
from pydantic import BaseModel, Field, ConfigDict


# =============================================================================
# Enums
# =============================================================================

class OrderStatus(str, Enum):
    """
    Order lifecycle states.
    Orders go straight from non-existent to confirmed; nothing else is reachable.
    """
    CONFIRMED = "confirmed"


# =============================================================================
# Core Domain Models
# =============================================================================

class Product(BaseModel):
    """
    Product entity from the catalog.

    Only the stock level changes after registration (see ProductService.update_stock).
    """
    id: int = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product display name")
    price: float = Field(..., ge=0, description="Current unit price")
    stock: int = Field(default=0, ge=0, description="Units on hand")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


class CartItem(BaseModel):
    """A single line item in a customer's cart."""
    product_id: int = Field(..., description="Reference to product")
    quantity: int = Field(..., ge=1, description="Quantity in cart")

    model_config = ConfigDict(frozen=True)


def generate_order_id() -> str:
    """Generate a short unique order identifier, e.g. ``ord-1a2b3c4d``."""
    return f"ord-{uuid4().hex[:8]}"


class Order(BaseModel):
    """
    Order entity created by OrderService from a non-empty cart.

    Carries the customer contact fields used for the confirmation
    messages and a snapshot of the cart's line items.
    """
    order_id: str = Field(default_factory=generate_order_id, description="Unique order identifier")
    customer_id: int = Field(..., description="Cart owner")
    status: OrderStatus = Field(
        default=OrderStatus.CONFIRMED,
        description="Order status"
    )
    email: str = Field(..., description="Address for the confirmation email")
    phone: str = Field(..., description="Number for the confirmation SMS")
    total_amount: float = Field(..., ge=0, description="Order total")
    items: list[CartItem] = Field(
        default_factory=list,
        description="Line items at the time the order was placed"
    )
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    def get_item_count(self) -> int:
        """Number of line items in the order."""
        return len(self.items)
