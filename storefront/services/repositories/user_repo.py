"""User Repository - Cart operations.

All methods use async/await with supabase-py v2.
"""

from storefront.logging import get_logger, sanitize_id_for_logging

from .base import BaseRepository

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    async def clear_cart(self, user_id: str) -> None:
        """Empty the user's cart. Clearing an empty cart is a no-op."""
        result = (
            await self.client.table("users")
            .update({"cart_items": {}})
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            # Unknown user: nothing to clear, the order is still valid
            logger.warning("Cart clear matched no user: %s", sanitize_id_for_logging(user_id))
