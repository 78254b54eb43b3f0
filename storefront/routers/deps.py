"""
Shared Dependencies for Routers

The database and the optional payment gateway are created once in the app
lifespan; handlers receive them through these dependencies. The database
dependency is ``get_database`` itself, so one override covers routers and auth.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from storefront.orders import OrderPlacementService, PaymentWebhookService
from storefront.services.database import Database, get_database

if TYPE_CHECKING:
    from storefront.services.payments import StripeGateway


def get_payment_gateway(request: Request) -> Optional["StripeGateway"]:
    """Gateway built at startup, or None when running in demo mode."""
    return getattr(request.app.state, "payment_gateway", None)


def get_placement_service(
    db: Database = Depends(get_database),
    gateway: Optional["StripeGateway"] = Depends(get_payment_gateway),
) -> OrderPlacementService:
    return OrderPlacementService(db, gateway)


def get_webhook_service(
    db: Database = Depends(get_database),
    gateway: Optional["StripeGateway"] = Depends(get_payment_gateway),
) -> PaymentWebhookService:
    return PaymentWebhookService(db, gateway)
