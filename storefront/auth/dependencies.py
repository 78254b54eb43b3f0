"""FastAPI dependencies resolving the caller identity.

Callers sign in with Supabase Auth on the frontend and send the access token
as ``Authorization: Bearer <token>`` or in the ``token`` cookie. The token is
checked against Supabase on every request; sellers carry
``app_metadata.role == "seller"``, which only the service role can set.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Cookie, Depends, Header, HTTPException

from storefront.errors import ERROR_FORBIDDEN, ERROR_UNAUTHORIZED
from storefront.services.database import Database, get_database

SELLER_ROLE = "seller"


@dataclass(frozen=True)
class AuthUser:
    id: str
    is_seller: bool = False


def _extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    if authorization:
        parts = authorization.split(" ")
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return cookie_token


async def verify_user_auth(
    authorization: str = Header(None, alias="Authorization"),
    token: str = Cookie(None),
    db: Database = Depends(get_database),
) -> AuthUser:
    """Resolve the caller or fail with 401."""
    raw_token = _extract_token(authorization, token)
    if not raw_token:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    user = await db.get_auth_user(raw_token)
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    app_metadata = getattr(user, "app_metadata", None) or {}
    return AuthUser(id=str(user.id), is_seller=app_metadata.get("role") == SELLER_ROLE)


async def verify_seller(user: AuthUser = Depends(verify_user_auth)) -> AuthUser:
    """Caller must hold the seller role (403 otherwise)."""
    if not user.is_seller:
        raise HTTPException(status_code=403, detail=ERROR_FORBIDDEN)
    return user
