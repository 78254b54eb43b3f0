"""Order listings with product and address references expanded."""
from typing import Any, Optional

from storefront.logging import get_logger
from storefront.services.models import OrderDetail

logger = get_logger(__name__)


async def load_order_details(db, user_id: Optional[str] = None) -> list[OrderDetail]:
    """
    Orders newest first, optionally for one user.

    Products and addresses are fetched in one query each. A reference that
    no longer resolves is returned as null.
    """
    rows = await db.get_order_rows(user_id)
    if not rows:
        return []

    product_ids = {item["product"] for row in rows for item in row.get("items") or []}
    address_ids = {row.get("address") for row in rows}

    products = await db.get_products_by_ids(product_ids)
    addresses = await db.get_addresses_by_ids(address_ids)

    details = []
    for row in rows:
        items = [
            {"product": products.get(item["product"]), "quantity": item["quantity"]}
            for item in row.get("items") or []
        ]
        details.append(
            OrderDetail(**{**row, "items": items, "address": addresses.get(row.get("address"))})
        )
    return details


async def _list_orders(db, user_id: Optional[str]) -> dict[str, Any]:
    try:
        orders = await load_order_details(db, user_id)
        return {"success": True, "orders": [order.to_api() for order in orders]}
    except Exception as e:
        logger.error("Order listing failed: %s", e)
        return {"success": False, "message": str(e)}


async def list_user_orders(db, user_id: str) -> dict[str, Any]:
    """All orders of one user."""
    return await _list_orders(db, user_id)


async def list_all_orders(db) -> dict[str, Any]:
    """All orders in the store. Callers gate this to sellers."""
    return await _list_orders(db, None)
