"""Payment Service - Stripe Checkout integration.

The gateway is an optional capability: ``build_payment_gateway()`` returns
None when no secret key is configured, and handlers fall back to demo mode.
"""

import json
import logging
from typing import Any, Optional

import stripe
from pydantic import ValidationError

from storefront.errors import ERROR_WEBHOOK_PREFIX, InvalidInput, SignatureInvalid
from storefront.payments.config import get_gateway_config
from storefront.payments.constants import DEFAULT_CURRENCY, WEBHOOK_TOLERANCE_SECONDS
from storefront.services.models import CheckoutSession, PaymentEvent

logger = logging.getLogger(__name__)


class StripeGateway:
    """Hosted checkout sessions and webhook verification for Stripe."""

    def __init__(
        self,
        secret_key: str,
        webhook_secret: Optional[str] = None,
        currency: str = DEFAULT_CURRENCY,
        client: Optional[stripe.StripeClient] = None,
    ):
        if not secret_key:
            raise ValueError("Stripe secret key (STRIPE_SECRET_KEY) is not configured")
        self.webhook_secret = webhook_secret
        self.currency = currency
        self._client = client or stripe.StripeClient(
            secret_key, http_client=stripe.HTTPXClient()
        )

    @property
    def verifies_webhooks(self) -> bool:
        return bool(self.webhook_secret)

    async def create_checkout_session(
        self,
        line_items: list[dict[str, Any]],
        success_url: str,
        cancel_url: str,
        metadata: dict[str, str],
    ) -> CheckoutSession:
        """
        Create a hosted checkout session in ``payment`` mode.

        Metadata is attached to the session and to its payment intent so both
        ``checkout.session.completed`` and ``payment_intent.succeeded`` can be
        reconciled.
        """
        session = await self._client.v1.checkout.sessions.create_async(
            params={
                "line_items": line_items,
                "mode": "payment",
                "success_url": success_url,
                "cancel_url": cancel_url,
                "metadata": metadata,
                "payment_intent_data": {"metadata": metadata},
            }
        )
        logger.info("Stripe checkout session created: %s", session.id)
        return CheckoutSession(id=session.id, url=session.url)

    def verify_event(self, payload: bytes, signature: Optional[str]) -> PaymentEvent:
        """
        Verify a webhook against the raw body and parse it.

        Raises:
            SignatureInvalid: header missing, malformed, stale, or not matching
            InvalidInput: signature fine but the body is not an event
        """
        if not self.webhook_secret:
            raise SignatureInvalid("Webhook secret is not configured")
        if not signature:
            raise SignatureInvalid("Missing Stripe-Signature header")

        try:
            body = payload.decode("utf-8")
        except UnicodeDecodeError:
            raise SignatureInvalid("Payload is not valid UTF-8")

        try:
            stripe.WebhookSignature.verify_header(
                body, signature, self.webhook_secret, WEBHOOK_TOLERANCE_SECONDS
            )
        except stripe.SignatureVerificationError as e:
            raise SignatureInvalid(str(e)) from e

        try:
            return PaymentEvent.model_validate(json.loads(body))
        except (ValueError, ValidationError) as e:
            raise InvalidInput(f"{ERROR_WEBHOOK_PREFIX}: Invalid payload") from e


def build_payment_gateway() -> Optional[StripeGateway]:
    """Construct the gateway from the environment, or None for demo mode."""
    config = get_gateway_config()
    if not config["secret_key"]:
        return None
    return StripeGateway(
        secret_key=config["secret_key"],
        webhook_secret=config["webhook_secret"],
        currency=config["currency"] or DEFAULT_CURRENCY,
    )
