"""
API dependency helpers.

Sessions come from the session factory stored on ``app.state`` by
`create_app`; each request gets its own session and repository instances.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from inventory.db.repositories import (
    CategoryRepository,
    SupplierRepository,
    ProductRepository,
    OrderRepository,
    RoleRepository,
    UserRepository,
    ReportRepository,
)


def get_db(request: Request):
    """Dependency to get a database session."""
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)


def get_supplier_repository(db: Session = Depends(get_db)) -> SupplierRepository:
    return SupplierRepository(db)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    return OrderRepository(db)


def get_role_repository(db: Session = Depends(get_db)) -> RoleRepository:
    return RoleRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_report_repository(db: Session = Depends(get_db)) -> ReportRepository:
    return ReportRepository(db)
