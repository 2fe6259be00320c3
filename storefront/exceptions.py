"""Storefront domain exceptions.

Raised by the services when a business rule is violated. Callers get them
unchanged; the demo API translates them into HTTP responses.
"""


class StorefrontError(Exception):
    """Base exception for storefront errors."""


class AvailabilityError(StorefrontError):
    """A product cannot be added to a cart because the catalog reports it unavailable."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} is not available")


class EmptyCartError(StorefrontError):
    """An order was requested for a cart with no line items."""

    def __init__(self, message: str = "Cannot create order with empty cart"):
        super().__init__(message)


class ProductNotFoundError(StorefrontError, KeyError):
    """The product id is not registered in the catalog."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
