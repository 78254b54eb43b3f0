"""Payment constants and gateway configuration."""
from .constants import (
    PaymentType,
    PaymentEventKind,
    TAX_RATE,
    DEFAULT_CURRENCY,
    classify_event,
)
from .config import (
    get_gateway_config,
    is_gateway_configured,
    is_webhook_verification_enabled,
)

__all__ = [
    "PaymentType",
    "PaymentEventKind",
    "TAX_RATE",
    "DEFAULT_CURRENCY",
    "classify_event",
    "get_gateway_config",
    "is_gateway_configured",
    "is_webhook_verification_enabled",
]
