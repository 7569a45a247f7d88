from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from inventory.db import models
from inventory.db.database import SQLITE_MEMORY_URL, build_engine, build_session_factory, init_db


@pytest.fixture
def engine():
    """Fresh in-memory SQLite store per test (StaticPool keeps one shared connection)."""
    eng = build_engine(SQLITE_MEMORY_URL)
    init_db(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    from inventory.api.main import create_app

    app = create_app(session_factory=session_factory)
    with TestClient(app) as c:
        yield c


def _persist(db: Session, row):
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture
def category_factory(db_session: Session):
    def _create(category_id: int, category_type: str = "Hardware"):
        return _persist(db_session, models.Category(category_id=category_id, category_type=category_type))
    return _create


@pytest.fixture
def supplier_factory(db_session: Session):
    def _create(supplier_id: int, name: str = "Acme", contact_info: str = None, address: str = None):
        return _persist(
            db_session,
            models.Supplier(supplier_id=supplier_id, name=name, contact_info=contact_info, address=address),
        )
    return _create


@pytest.fixture
def product_factory(db_session: Session):
    def _create(
        product_id: int,
        category_id: int,
        supplier_id: int = None,
        stock_level: int = 5,
        reorder_level: int = 2,
        price: str = "9.99",
    ):
        return _persist(
            db_session,
            models.Product(
                product_id=product_id,
                sku=f"SKU-{product_id}",
                name=f"Product {product_id}",
                description=None,
                price=Decimal(price),
                category_id=category_id,
                stock_level=stock_level,
                reorder_level=reorder_level,
                supplier_id=supplier_id,
            ),
        )
    return _create


@pytest.fixture
def order_factory(db_session: Session):
    def _create(order_id: int, product_id: int, quantity: int = 1, status: str = "Pending"):
        return _persist(
            db_session,
            models.Order(
                order_id=order_id,
                product_id=product_id,
                quantity=quantity,
                order_date=datetime(2024, 11, 23, 10, 0, 0),
                status=status,
            ),
        )
    return _create


@pytest.fixture
def role_factory(db_session: Session):
    def _create(role_id: int, role_name: str = "Clerk"):
        return _persist(db_session, models.Role(role_id=role_id, role_name=role_name))
    return _create
