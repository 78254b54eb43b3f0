"""Order processing module."""
from .placement import OrderPlacementService
from .pricing import PricedCart, build_checkout_line_items, calculate_tax, price_items
from .queries import list_all_orders, list_user_orders, load_order_details
from .webhook import PaymentWebhookService

__all__ = [
    "OrderPlacementService",
    "PaymentWebhookService",
    "PricedCart",
    "build_checkout_line_items",
    "calculate_tax",
    "price_items",
    "list_all_orders",
    "list_user_orders",
    "load_order_details",
]
