"""Payment constants and enums."""
from decimal import Decimal
from enum import Enum


class PaymentType(str, Enum):
    """How an order is settled. Stored verbatim in ``orders.payment_type``."""
    COD = "COD"
    ONLINE = "Online"
    ONLINE_DEMO = "Online (Demo)"


class PaymentEventKind(str, Enum):
    """
    Payment events that confirm an order.

    Both carry ``{orderId, userId}`` in their metadata. Every other Stripe
    event type is acknowledged and ignored.
    """
    CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"


# Flat surcharge added to every order subtotal
TAX_RATE = Decimal("0.02")

DEFAULT_CURRENCY = "usd"

# Stripe rejects signatures older than this many seconds
WEBHOOK_TOLERANCE_SECONDS = 300

# Redirect paths appended to the request origin
CHECKOUT_SUCCESS_PATH = "/loader?next=my-orders"
CHECKOUT_CANCEL_PATH = "/cart"


def classify_event(event_type: str | None) -> PaymentEventKind | None:
    """
    Map a raw event type onto a known kind.

    Returns None for anything outside the recognised set.
    """
    try:
        return PaymentEventKind(event_type)
    except ValueError:
        return None
