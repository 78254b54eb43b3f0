"""
API Request Models

Bodies are camelCase on the wire; snake_case is accepted too.
"""
from typing import Any, Optional

from storefront.services.models import StoreModel


class PlaceOrderRequest(StoreModel):
    """Body of both placement endpoints.

    ``address`` and ``items`` are taken as sent and validated by the placement
    service, which reports bad input as ``success: false``. ``user_id`` is kept
    for older clients; the authenticated caller wins.
    """
    user_id: Optional[str] = None
    address: Any = None
    items: Any = None
