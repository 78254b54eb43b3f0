"""Tests for auth dependencies backed by Supabase Auth"""
import pytest
from fastapi import HTTPException

from storefront.auth import AuthUser, verify_seller, verify_user_auth


@pytest.mark.asyncio
async def test_access_token_resolves_to_user(db, issue_token):
    token = issue_token("user-1")

    user = await verify_user_auth(authorization=f"Bearer {token}", token=None, db=db)

    assert user == AuthUser(id="user-1", is_seller=False)


@pytest.mark.asyncio
async def test_seller_role_from_app_metadata(db, issue_token):
    token = issue_token("seller-1", role="seller")

    user = await verify_user_auth(authorization=f"Bearer {token}", token=None, db=db)

    assert user.is_seller is True


@pytest.mark.asyncio
async def test_bearer_header_wins_over_cookie(db, issue_token):
    header_token = issue_token("from-header")
    cookie_token = issue_token("from-cookie")

    user = await verify_user_auth(authorization=f"Bearer {header_token}", token=cookie_token, db=db)

    assert user.id == "from-header"


@pytest.mark.asyncio
async def test_malformed_header_falls_back_to_cookie(db, issue_token):
    cookie_token = issue_token("from-cookie")

    user = await verify_user_auth(authorization="Token abc", token=cookie_token, db=db)

    assert user.id == "from-cookie"


@pytest.mark.asyncio
async def test_rejected_token_is_401(db):
    with pytest.raises(HTTPException) as exc:
        await verify_user_auth(authorization="Bearer forged", token=None, db=db)

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_no_token_is_401(db):
    with pytest.raises(HTTPException) as exc:
        await verify_user_auth(authorization=None, token=None, db=db)

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_get_auth_user_returns_none_for_rejected_token(db):
    assert await db.get_auth_user("expired") is None


@pytest.mark.asyncio
async def test_verify_seller():
    seller = AuthUser(id="s", is_seller=True)

    assert await verify_seller(seller) is seller
    with pytest.raises(HTTPException) as exc:
        await verify_seller(AuthUser(id="u"))
    assert exc.value.status_code == 403
