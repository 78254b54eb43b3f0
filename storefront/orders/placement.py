"""
Order Placement Service

Creates cash-on-delivery and online orders. Handlers never raise: every
failure is reported as ``{"success": False, "message": ...}`` and the caller
inspects the flag.

Order creation, cart clearing and checkout-session creation are separate
writes. If the session call fails after the insert, the order stays unpaid
and is not cleaned up.
"""
from typing import Any

from pydantic import TypeAdapter, ValidationError

from storefront.errors import ERROR_INVALID_DATA, InvalidInput
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.payments.constants import (
    CHECKOUT_CANCEL_PATH,
    CHECKOUT_SUCCESS_PATH,
    PaymentType,
)
from storefront.services.models import OrderItem

from .pricing import build_checkout_line_items, price_items

logger = get_logger(__name__)

MESSAGE_ORDER_PLACED = "Order placed successfully!"
MESSAGE_DEMO_PAYMENT = "Payment processed successfully (demo mode)."


_order_items = TypeAdapter(list[OrderItem])


def _validate(address: Any, items: Any) -> list[OrderItem]:
    """Non-empty address and item list, every quantity at least 1."""
    if not isinstance(address, str) or not address or not items:
        raise InvalidInput(ERROR_INVALID_DATA)
    try:
        return _order_items.validate_python(items)
    except ValidationError as e:
        raise InvalidInput(ERROR_INVALID_DATA) from e


def _failure(error: Exception) -> dict[str, Any]:
    return {"success": False, "message": str(error)}


class OrderPlacementService:
    """Places orders against the database and, optionally, the payment gateway."""

    def __init__(self, db, gateway=None):
        self.db = db
        self.gateway = gateway

    async def place_cod(
        self,
        user_id: str,
        address: Any,
        items: Any,
    ) -> dict[str, Any]:
        """Cash on delivery: price, persist unpaid, acknowledge without an order id."""
        try:
            items = _validate(address, items)
            cart = await price_items(self.db, items)
            await self.db.create_order(
                user_id=user_id,
                items=items,
                amount=cart.amount,
                address=address,
                payment_type=PaymentType.COD,
                is_paid=False,
            )
            return {"success": True, "message": MESSAGE_ORDER_PLACED}
        except InvalidInput as e:
            return _failure(e)
        except Exception as e:
            logger.error("COD order failed: %s", e)
            return _failure(e)

    async def place_online(
        self,
        user_id: str,
        address: Any,
        items: Any,
        origin: str,
    ) -> dict[str, Any]:
        """
        Online payment.

        Without a gateway the order is created paid (demo mode) and the cart
        is cleared right away. With a gateway the order is created unpaid and
        the caller is redirected to a hosted checkout page; payment and cart
        clearing are left to the webhook.
        """
        try:
            items = _validate(address, items)
            cart = await price_items(self.db, items)

            if self.gateway is None:
                return await self._place_demo(user_id, address, items, cart.amount)

            order = await self.db.create_order(
                user_id=user_id,
                items=items,
                amount=cart.amount,
                address=address,
                payment_type=PaymentType.ONLINE,
                is_paid=False,
            )

            try:
                session = await self.gateway.create_checkout_session(
                    line_items=build_checkout_line_items(cart, self.gateway.currency),
                    success_url=f"{origin}{CHECKOUT_SUCCESS_PATH}",
                    cancel_url=f"{origin}{CHECKOUT_CANCEL_PATH}",
                    metadata={"orderId": order.id, "userId": user_id},
                )
            except Exception:
                logger.warning(
                    "Checkout session failed, order %s left unpaid",
                    sanitize_id_for_logging(order.id),
                )
                raise

            return {"success": True, "url": session.url}
        except InvalidInput as e:
            return _failure(e)
        except Exception as e:
            logger.error("Online order failed: %s", e)
            return _failure(e)

    async def _place_demo(
        self,
        user_id: str,
        address: str,
        items: list[OrderItem],
        amount,
    ) -> dict[str, Any]:
        order = await self.db.create_order(
            user_id=user_id,
            items=items,
            amount=amount,
            address=address,
            payment_type=PaymentType.ONLINE_DEMO,
            is_paid=True,
        )
        await self.db.clear_user_cart(user_id)
        logger.info("Demo payment recorded for order %s", sanitize_id_for_logging(order.id))
        return {
            "success": True,
            "simulated": True,
            "message": MESSAGE_DEMO_PAYMENT,
            "orderId": order.id,
        }
