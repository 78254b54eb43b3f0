"""Address Repository - Shipping address lookups."""
from typing import Iterable

from storefront.services.models import Address

from .base import BaseRepository


class AddressRepository(BaseRepository):
    """Address database operations."""

    async def get_many(self, address_ids: Iterable[str]) -> dict[str, Address]:
        """Fetch several addresses at once, keyed by ID."""
        ids = sorted({a for a in address_ids if a})
        if not ids:
            return {}
        result = await self.client.table("addresses").select("*").in_("id", ids).execute()
        return {a["id"]: Address(**a) for a in result.data or []}
