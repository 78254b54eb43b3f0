"""
Repository Pattern for Database Operations

- OrderRepository: order create, mark paid, listings
- ProductRepository: price lookups, bulk fetch for listings
- UserRepository: cart clearing
- AddressRepository: bulk fetch for listings
"""
from .order_repo import OrderRepository
from .product_repo import ProductRepository
from .user_repo import UserRepository
from .address_repo import AddressRepository

__all__ = [
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
    "AddressRepository",
]
