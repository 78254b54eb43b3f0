# Services Module
from .database import Database
from .payments import StripeGateway, build_payment_gateway

__all__ = ["Database", "StripeGateway", "build_payment_gateway"]
