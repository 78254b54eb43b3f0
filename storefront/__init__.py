"""
Storefront order backend.

- orders: pricing, placement, webhook reconciliation, listings
- services: Supabase repositories, Stripe gateway, models
- routers: FastAPI endpoints
- auth: caller identity dependencies
"""
