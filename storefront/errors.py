"""
Error taxonomy and message constants.

Message constants are shared between handlers and tests so wire texts stay
in one place. Exceptions carry the HTTP status the webhook route answers
with; placement and query handlers report them as ``success: false``.
"""

# Placement
ERROR_INVALID_DATA = "Invalid data"
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Webhook
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_MISSING_METADATA = "Missing metadata"
ERROR_WEBHOOK_PREFIX = "Webhook Error"
ERROR_INTERNAL = "Internal server error"

# Auth
ERROR_UNAUTHORIZED = "Not Authorized"
ERROR_FORBIDDEN = "Seller access required"


class StoreError(Exception):
    """Base class for expected, classified failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(StoreError):
    """Missing address, empty cart, or an unparseable event body."""

    status_code = 400


class NotFound(StoreError):
    """A product or order reference could not be resolved."""

    status_code = 404


class SignatureInvalid(StoreError):
    """Webhook signature did not verify; the event must not be processed."""

    status_code = 400

    def __init__(self, reason: str):
        super().__init__(f"{ERROR_WEBHOOK_PREFIX}: {reason}")
        self.reason = reason


class MissingMetadata(StoreError):
    """A recognised payment event without orderId/userId."""

    status_code = 400

    def __init__(self, message: str = ERROR_MISSING_METADATA):
        super().__init__(message)
