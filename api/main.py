"""
FastAPI demo application for the storefront.

This application provides:
1. Catalog browsing (/products)
2. A checkout endpoint that runs the full cart -> order -> notification flow
   (/demo/checkout) and reports which messages were sent

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Depends
from pydantic import BaseModel, Field

from storefront.catalog import ProductService, load_products
from storefront.demo import checkout
from storefront.exceptions import AvailabilityError, EmptyCartError
from storefront.models import Order, Product
from storefront.notifications import NotificationService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("storefront_api")

# Module-level catalog (would use proper DI in production)
_catalog: Optional[ProductService] = None


def get_catalog() -> ProductService:
    """Get the catalog instance, loading the fixture on first use."""
    global _catalog
    if _catalog is None:
        _catalog = load_products()
    return _catalog


def reset_api_state(catalog: Optional[ProductService] = None) -> None:
    """Reset API state (for testing)."""
    global _catalog
    _catalog = catalog


# Request / response models
class CheckoutLine(BaseModel):
    """One line of a checkout request."""
    product_id: int
    quantity: int = Field(default=1, ge=1)


class CheckoutRequest(BaseModel):
    """Cart contents and contact details for a demo checkout."""
    customer_id: int = 1
    email: str = "customer@example.com"
    phone: str = "+1234567890"
    lines: list[CheckoutLine] = Field(default_factory=list)


class CheckoutResult(BaseModel):
    """The confirmed order and the notifications it produced."""
    order: Order
    notifications_sent: int
    messages: list[dict[str, Any]]


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logging.info("Starting Storefront Demo API")
    yield
    logging.info("Shutting down")


app = FastAPI(
    title="Storefront Demo",
    description="""
    A tiny in-memory shop: product catalog, cart, order placement and
    confirmation messages (mock email and SMS).
    """,
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "storefront-demo"}


@app.get("/products", response_model=list[Product], tags=["Catalog"])
def list_products(catalog: ProductService = Depends(get_catalog)):
    """List every product in the catalog."""
    return catalog.get_products()


@app.get("/products/{product_id}", response_model=Product, tags=["Catalog"])
def get_product(product_id: int, catalog: ProductService = Depends(get_catalog)):
    """Get one product."""
    product = catalog.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


@app.post("/demo/checkout", response_model=CheckoutResult, tags=["Demo"])
def demo_checkout(request: CheckoutRequest, catalog: ProductService = Depends(get_catalog)):
    """
    Fill a cart with the requested lines and place the order.

    Each call uses a fresh NotificationService, so the returned messages
    are exactly the ones this order produced.
    """
    notifications = NotificationService()
    lines = [(line.product_id, line.quantity) for line in request.lines]

    try:
        order = checkout(
            catalog,
            notifications,
            customer_id=request.customer_id,
            email=request.email,
            phone=request.phone,
            lines=lines,
        )
    except AvailabilityError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))

    messages = notifications.messages()
    return CheckoutResult(
        order=order,
        notifications_sent=len(messages),
        messages=[
            m.model_dump(mode="json", include={"channel", "recipient", "subject", "body", "delivered"})
            for m in messages
        ],
    )
