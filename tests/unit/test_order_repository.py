from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from inventory.db import schemas
from inventory.db.repositories import OrderRepository, ProductRepository


@pytest.fixture
def stocked_product(category_factory, product_factory):
    category_factory(1)
    return product_factory(10, category_id=1)


def test_order_round_trip(db_session, stocked_product):
    repo = OrderRepository(db_session)
    payload = schemas.OrderCreate(
        order_id=100,
        product_id=10,
        quantity=3,
        order_date=datetime(2024, 11, 23, 9, 30, tzinfo=timezone.utc),
        status="Pending",
    )

    created = repo.create(payload)
    assert created.ok
    assert created.value.order_id == 100

    assert repo.get(100).value.model_dump() == payload.model_dump()


def test_order_date_defaults_to_insert_time(db_session, stocked_product):
    result = OrderRepository(db_session).create(
        schemas.OrderCreate(order_id=101, product_id=10, quantity=1, status="Shipped")
    )
    assert result.ok
    assert result.value.order_date is not None
    assert result.value.order_date.utcoffset() == timedelta(0)


def test_order_requires_positive_quantity():
    with pytest.raises(ValidationError):
        schemas.OrderCreate(order_id=1, product_id=1, quantity=0, status="Pending")


def test_order_for_unknown_product_is_storage_error(db_session):
    repo = OrderRepository(db_session)
    result = repo.create(schemas.OrderCreate(order_id=1, product_id=404, quantity=2, status="Pending"))
    assert result.failed
    assert repo.list().value == []


def test_order_update_and_delete(db_session, stocked_product, order_factory):
    order_factory(200, product_id=10, quantity=1)
    repo = OrderRepository(db_session)

    update = schemas.OrderUpdate(
        product_id=10,
        quantity=8,
        order_date=datetime(2024, 12, 1, 12, 0, tzinfo=timezone.utc),
        status="Delivered",
    )
    assert repo.update(200, update).ok
    order = repo.get(200).value
    assert order.quantity == 8
    assert order.status == "Delivered"
    assert order.order_date == datetime(2024, 12, 1, 12, 0, tzinfo=timezone.utc)

    assert repo.update(201, update).not_found
    assert repo.delete(200).ok
    assert repo.get(200).not_found
    assert repo.delete(200).not_found


def test_product_with_orders_cannot_be_deleted(db_session, stocked_product, order_factory):
    order_factory(300, product_id=10)
    result = ProductRepository(db_session).delete(10)
    assert result.failed
    assert OrderRepository(db_session).get(300).ok


def test_order_date_with_offset_is_stored_as_utc(db_session, stocked_product):
    repo = OrderRepository(db_session)
    local = datetime(2024, 11, 23, 9, 30, tzinfo=timezone(timedelta(hours=5)))

    repo.create(schemas.OrderCreate(order_id=400, product_id=10, quantity=1, order_date=local, status="Pending"))
    db_session.expire_all()

    stored = repo.get(400).value.order_date
    assert stored == local
    assert stored.utcoffset() == timedelta(0)
    assert stored == datetime(2024, 11, 23, 4, 30, tzinfo=timezone.utc)


def test_naive_order_date_is_read_back_as_utc(db_session, stocked_product):
    repo = OrderRepository(db_session)
    repo.create(
        schemas.OrderCreate(
            order_id=401, product_id=10, quantity=1, order_date=datetime(2024, 11, 23, 9, 30), status="Pending"
        )
    )
    db_session.expire_all()

    assert repo.get(401).value.order_date == datetime(2024, 11, 23, 9, 30, tzinfo=timezone.utc)
