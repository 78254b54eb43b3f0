"""
Supabase Database Service

Provides Database class with all operations via Repository pattern.

Usage:
    from storefront.services.database import get_database

    # In async context (after init_database() called at startup):
    db = get_database()
    product = await db.get_product_by_id("prod-1")

    # At FastAPI startup (lifespan):
    await init_database()
"""

import asyncio
import os
from typing import Iterable, Optional

from supabase import AuthError
from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.payments.constants import PaymentType
from storefront.services.models import Address, Order, OrderItem, Product
from storefront.services.repositories import (
    AddressRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase database client with all operations.

    Uses Repository pattern internally but exposes a flat API to handlers.
    Must be initialized via async factory method `create()` or `init_database()`.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self._orders_repo = OrderRepository(self.client)
        self._products_repo = ProductRepository(self.client)
        self._users_repo = UserRepository(self.client)
        self._addresses_repo = AddressRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method: build the async Supabase client from env."""
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        client = await acreate_client(url, key)
        return cls(client)

    # ==================== PRODUCT OPERATIONS ====================

    async def get_product_by_id(self, product_id: str) -> Product | None:
        return await self._products_repo.get_by_id(product_id)

    async def get_products_by_ids(self, product_ids: Iterable[str]) -> dict[str, Product]:
        return await self._products_repo.get_many(product_ids)

    # ==================== ORDER OPERATIONS ====================

    async def create_order(
        self,
        user_id: str,
        items: list[OrderItem],
        amount,
        address: str,
        payment_type: PaymentType,
        is_paid: bool = False,
    ) -> Order:
        return await self._orders_repo.create(
            user_id=user_id,
            items=items,
            amount=amount,
            address=address,
            payment_type=payment_type,
            is_paid=is_paid,
        )

    async def mark_order_paid(self, order_id: str) -> Order | None:
        return await self._orders_repo.mark_paid(order_id)

    async def get_order_rows(self, user_id: str | None = None) -> list[dict]:
        return await self._orders_repo.list_rows(user_id)

    # ==================== USER OPERATIONS ====================

    async def clear_user_cart(self, user_id: str) -> None:
        await self._users_repo.clear_cart(user_id)

    # ==================== ADDRESS OPERATIONS ====================

    async def get_addresses_by_ids(self, address_ids: Iterable[str]) -> dict[str, Address]:
        return await self._addresses_repo.get_many(address_ids)

    # ==================== AUTH ====================

    async def get_auth_user(self, access_token: str):
        """Resolve a Supabase access token to its auth user.

        Returns None when the token is expired, revoked or malformed.
        """
        try:
            response = await self.client.auth.get_user(access_token)
        except AuthError as e:
            logger.info("Access token rejected: %s", sanitize_string_for_logging(str(e)))
            return None
        return response.user if response else None


# ==================== SINGLETON ====================

_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize async database singleton.

    Called at FastAPI startup (lifespan) or lazily on first use.

    Returns:
        Database instance (also cached as singleton)
    """
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        # Double-check after acquiring lock
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton at FastAPI shutdown (lifespan)."""
    global _db
    if _db is not None:
        try:
            await _db.client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Error closing Supabase client: {e}")
        _db = None
        logger.info("Supabase client closed")


def get_database() -> Database:
    """Get database instance (sync accessor).

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db
