"""
Webhooks Router

Stripe posts here. Status codes matter: the gateway retries on anything
other than 2xx, so only failures worth retrying answer 5xx.
"""

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from storefront.errors import ERROR_INTERNAL, StoreError
from storefront.logging import get_logger
from storefront.orders import PaymentWebhookService

from .deps import get_webhook_service

logger = get_logger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post("/stripe")
@router.post("/api/webhook/stripe")
async def stripe_webhook(
    request: Request,
    stripe_signature: str = Header(None, alias="Stripe-Signature"),
    service: PaymentWebhookService = Depends(get_webhook_service),
):
    """Handle Stripe payment events. Signature is checked against the raw body."""
    payload = await request.body()
    try:
        body = await service.handle(payload, stripe_signature)
    except StoreError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception as e:
        logger.error(f"Error handling webhook: {e}", exc_info=True)
        return PlainTextResponse(ERROR_INTERNAL, status_code=500)

    return JSONResponse(body)
