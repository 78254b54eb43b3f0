"""Authentication package."""
from .dependencies import SELLER_ROLE, AuthUser, verify_seller, verify_user_auth

__all__ = [
    "SELLER_ROLE",
    "AuthUser",
    "verify_seller",
    "verify_user_auth",
]
