"""Order Repository - Order operations."""
from typing import Optional

from storefront.payments.constants import PaymentType
from storefront.services.models import Order, OrderItem
from storefront.services.money import to_storage_number

from .base import BaseRepository


class OrderRepository(BaseRepository):
    """Order database operations."""

    async def create(
        self,
        user_id: str,
        items: list[OrderItem],
        amount,
        address: str,
        payment_type: PaymentType,
        is_paid: bool = False,
    ) -> Order:
        """Insert a new order. ``created_at`` is filled in by the database."""
        data = {
            "user_id": user_id,
            "items": [item.model_dump() for item in items],
            "amount": to_storage_number(amount),
            "address": address,
            "payment_type": payment_type.value,
            "is_paid": is_paid,
        }
        result = await self.client.table("orders").insert(data).execute()
        return Order(**result.data[0])

    async def mark_paid(self, order_id: str) -> Optional[Order]:
        """Set ``is_paid``. Returns the updated order, or None if it does not exist.

        Setting the flag on an already paid order is a no-op update.
        """
        result = (
            await self.client.table("orders")
            .update({"is_paid": True})
            .eq("id", order_id)
            .execute()
        )
        return Order(**result.data[0]) if result.data else None

    async def list_rows(self, user_id: Optional[str] = None) -> list[dict]:
        """Raw order rows, newest first, optionally for a single user."""
        query = self.client.table("orders").select("*")
        if user_id is not None:
            query = query.eq("user_id", user_id)
        result = await query.order("created_at", desc=True).execute()
        return result.data or []
