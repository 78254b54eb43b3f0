"""
Payment Webhook Service

Reconciles gateway events with stored orders. Delivery is at-least-once, so
every step is safe to repeat: re-marking a paid order and re-clearing an
empty cart change nothing.
"""
from typing import Any

from storefront.errors import ERROR_ORDER_NOT_FOUND, MissingMetadata, NotFound, SignatureInvalid
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.payments.constants import PaymentEventKind, classify_event
from storefront.services.models import PaymentEvent

logger = get_logger(__name__)


class PaymentWebhookService:
    """Verifies, classifies and applies one payment event."""

    def __init__(self, db, gateway=None):
        self.db = db
        self.gateway = gateway

    @property
    def enabled(self) -> bool:
        return self.gateway is not None and self.gateway.verifies_webhooks

    async def handle(self, payload: bytes, signature: str | None) -> dict[str, Any]:
        """
        Process a raw webhook delivery.

        Returns the acknowledgement body on success.

        Raises:
            SignatureInvalid: verification failed, nothing was touched
            InvalidInput: verified body is not an event
            MissingMetadata: recognised event without orderId/userId
            NotFound: the referenced order does not exist
        """
        if not self.enabled:
            return {"received": True, "simulated": True}

        try:
            event = self.gateway.verify_event(payload, signature)
        except SignatureInvalid as e:
            logger.error("Webhook signature verification failed: %s", e.reason)
            raise

        kind = classify_event(event.type)
        if kind is None:
            logger.debug("Ignoring webhook event type %s", sanitize_string_for_logging(event.type))
            return {"received": True}

        return await self._confirm_payment(kind, event)

    async def _confirm_payment(self, kind: PaymentEventKind, event: PaymentEvent) -> dict[str, Any]:
        metadata = event.metadata
        order_id = metadata.get("orderId")
        user_id = metadata.get("userId")
        if not order_id or not user_id:
            logger.error("Missing metadata for orderId or userId on %s", kind.value)
            raise MissingMetadata()

        order = await self.db.mark_order_paid(order_id)
        if order is None:
            raise NotFound(ERROR_ORDER_NOT_FOUND)

        await self.db.clear_user_cart(user_id)
        logger.info(
            "Order %s marked paid via %s",
            sanitize_id_for_logging(order_id),
            kind.value,
        )
        return {"received": True}
