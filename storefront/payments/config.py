"""Payment gateway configuration."""
import os
import logging
from typing import Dict, Optional

from .constants import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


# Env vars the gateway reads; the secret key alone switches demo mode off
GATEWAY_ENV_VARS = ("STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET", "STRIPE_CURRENCY")


def get_gateway_config() -> Dict[str, Optional[str]]:
    """
    Read the Stripe settings from the environment.

    Returns dict with config keys and their values (or None if not set).
    """
    return {
        "secret_key": os.environ.get("STRIPE_SECRET_KEY") or None,
        "webhook_secret": os.environ.get("STRIPE_WEBHOOK_SECRET") or None,
        "currency": (os.environ.get("STRIPE_CURRENCY") or DEFAULT_CURRENCY).lower(),
    }


def is_gateway_configured() -> bool:
    """Whether real checkout sessions can be created."""
    return bool(get_gateway_config()["secret_key"])


def is_webhook_verification_enabled() -> bool:
    """Whether incoming webhooks can be verified and processed."""
    config = get_gateway_config()
    return bool(config["secret_key"] and config["webhook_secret"])


def get_frontend_url() -> str:
    """Redirect base used when a request carries no Origin header."""
    return os.environ.get("FRONTEND_URL", "http://localhost:5173").rstrip("/")


def log_gateway_mode() -> None:
    """Log which payment mode the process runs in (once, at startup)."""
    if not is_gateway_configured():
        logger.warning("STRIPE_SECRET_KEY not set: online orders run in demo mode")
    elif not is_webhook_verification_enabled():
        logger.warning("STRIPE_WEBHOOK_SECRET not set: webhooks are acknowledged without processing")
    else:
        logger.info("Stripe checkout and webhook verification enabled")
