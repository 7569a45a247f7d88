"""
Domain-split SQLAlchemy models with a compatibility aggregator.

Exposes `Base`, `now_utc`, and all ORM classes of the inventory store.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .catalog import Category, Supplier, Product
from .orders import Order
from .users import Role, User

__all__ = [
    # base
    "Base",
    "now_utc",
    # catalog
    "Category",
    "Supplier",
    "Product",
    # orders
    "Order",
    # accounts
    "Role",
    "User",
]
