"""
Storefront - Main FastAPI Application

Single entry point for the order API and the Stripe webhook.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.logging import get_logger
from storefront.payments.config import log_gateway_mode
from storefront.routers import orders_router, webhooks_router
from storefront.services.database import close_database, init_database
from storefront.services.payments import build_payment_gateway

logger = get_logger(__name__)

FRONTEND_ORIGINS = os.environ.get("FRONTEND_ORIGINS", "http://localhost:5173").split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    await init_database()
    app.state.payment_gateway = build_payment_gateway()
    log_gateway_mode()
    yield
    # Shutdown
    await close_database()


app = FastAPI(
    title="Storefront Orders",
    description="Order placement and Stripe payment confirmation API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in FRONTEND_ORIGINS if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(orders_router)
app.include_router(webhooks_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    gateway = getattr(app.state, "payment_gateway", None)
    return {
        "status": "ok",
        "service": "storefront",
        "payments": "stripe" if gateway is not None else "demo",
    }
