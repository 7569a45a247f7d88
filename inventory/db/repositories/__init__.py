"""
Per-entity repositories for database access.

Each repository is constructed with an explicit SQLAlchemy session and
returns `inventory.db.results.Result` values instead of raising.
"""

from .categories import CategoryRepository
from .suppliers import SupplierRepository
from .products import ProductRepository
from .orders import OrderRepository
from .roles import RoleRepository
from .users import UserRepository
from .reports import ReportRepository

__all__ = [
    "CategoryRepository",
    "SupplierRepository",
    "ProductRepository",
    "OrderRepository",
    "RoleRepository",
    "UserRepository",
    "ReportRepository",
]
