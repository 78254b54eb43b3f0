"""
Order Endpoints

Placement and listing. Responses are always HTTP 200; callers check
``success``.
"""

from fastapi import APIRouter, Depends, Header

from storefront.auth import AuthUser, verify_seller, verify_user_auth
from storefront.orders import OrderPlacementService, list_all_orders, list_user_orders
from storefront.payments.config import get_frontend_url
from storefront.services.database import Database, get_database

from .deps import get_placement_service
from .models import PlaceOrderRequest

router = APIRouter(prefix="/api/order", tags=["orders"])


@router.post("/cod")
async def place_order_cod(
    request: PlaceOrderRequest,
    user: AuthUser = Depends(verify_user_auth),
    service: OrderPlacementService = Depends(get_placement_service),
):
    """Place a cash-on-delivery order."""
    return await service.place_cod(user.id, request.address, request.items)


@router.post("/stripe")
async def place_order_online(
    request: PlaceOrderRequest,
    user: AuthUser = Depends(verify_user_auth),
    origin: str = Header(None, alias="Origin"),
    service: OrderPlacementService = Depends(get_placement_service),
):
    """Place an online order: hosted checkout URL, or an instant demo payment."""
    base_url = (origin or get_frontend_url()).rstrip("/")
    return await service.place_online(user.id, request.address, request.items, base_url)


@router.get("/user")
async def get_user_orders(
    user: AuthUser = Depends(verify_user_auth),
    db: Database = Depends(get_database),
):
    """Orders of the calling user, newest first."""
    return await list_user_orders(db, user.id)


@router.get("/seller")
async def get_all_orders(
    _seller: AuthUser = Depends(verify_seller),
    db: Database = Depends(get_database),
):
    """Every order in the store, newest first."""
    return await list_all_orders(db)
