"""
Domain-split Pydantic schemas with a compatibility aggregator.

Create payloads carry the caller-supplied identifier (except roles), update
payloads carry every mutable field, and read models are built from ORM rows.
"""

from .catalog import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    Category,
    SupplierBase,
    SupplierCreate,
    SupplierUpdate,
    Supplier,
    ProductBase,
    ProductCreate,
    ProductUpdate,
    Product,
    ProductDetail,
)
from .orders import OrderBase, OrderCreate, OrderUpdate, Order
from .users import RoleBase, RoleCreate, RoleUpdate, Role, UserBase, UserCreate, UserUpdate, User
from .reports import InventoryReportRow

__all__ = [
    # Catalog
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "Category",
    "SupplierBase",
    "SupplierCreate",
    "SupplierUpdate",
    "Supplier",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "Product",
    "ProductDetail",
    # Orders
    "OrderBase",
    "OrderCreate",
    "OrderUpdate",
    "Order",
    # Accounts
    "RoleBase",
    "RoleCreate",
    "RoleUpdate",
    "Role",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    # Reports
    "InventoryReportRow",
]
