"""
Capability interfaces the storefront services depend on.

Cart only needs to ask a catalog two questions, and OrderService only needs
to send two kinds of message. Expressing those needs as Protocols lets the
real services and any test double (a Mock, a stub class) stand in for each
other without sharing a base class.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Catalog(Protocol):
    """What a Cart needs from the product catalog."""

    def is_product_available(self, product_id: int) -> bool:
        """True if the product exists and has stock left."""
        ...

    def get_product_price(self, product_id: int) -> float:
        """Current unit price of the product."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """What an OrderService needs to reach the customer."""

    def send_email(self, to: str, subject: str, body: str) -> bool:
        ...

    def send_sms(self, to: str, body: str) -> bool:
        ...
