"""Product Repository - Product catalog lookups."""
from typing import Iterable, Optional

from storefront.services.models import Product

from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def get_many(self, product_ids: Iterable[str]) -> dict[str, Product]:
        """Fetch several products at once, keyed by ID. Unknown IDs are absent."""
        ids = sorted(set(product_ids))
        if not ids:
            return {}
        result = await self.client.table("products").select("*").in_("id", ids).execute()
        return {p["id"]: Product(**p) for p in result.data or []}
