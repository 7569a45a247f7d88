from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from inventory.db.models import Base

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _make_alembic_config() -> Config:
    """Return an Alembic config pointing at the service migrations.

    No ini file is attached so the migration run leaves test logging alone.
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    return cfg


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("INVENTORY_TEST_DB", url)
    engine = create_engine(url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.mark.integration
def test_upgrade_head_creates_inventory_schema(migration_db):
    command.upgrade(_make_alembic_config(), "head")

    inspector = inspect(migration_db)
    tables = set(inspector.get_table_names())
    assert set(Base.metadata.tables) <= tables

    # Migrated columns match the ORM models
    for name, table in Base.metadata.tables.items():
        migrated = {column["name"] for column in inspector.get_columns(name)}
        assert migrated == set(table.columns.keys()), name

    product_refs = {fk["referred_table"] for fk in inspector.get_foreign_keys("products")}
    assert product_refs == {"categories", "suppliers"}
    assert {fk["referred_table"] for fk in inspector.get_foreign_keys("orders")} == {"products"}
    assert {fk["referred_table"] for fk in inspector.get_foreign_keys("users")} == {"roles"}

    product_checks = {ck["name"] for ck in inspector.get_check_constraints("products")}
    assert product_checks == {
        "ck_products_stock_level_non_negative",
        "ck_products_reorder_level_non_negative",
    }
    order_checks = {ck["name"] for ck in inspector.get_check_constraints("orders")}
    assert order_checks == {"ck_orders_quantity_positive"}


@pytest.mark.integration
def test_alembic_upgrade_and_downgrade_cycle(migration_db):
    """Upgrade base→head, downgrade back to base, and upgrade again."""
    cfg = _make_alembic_config()

    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")
    assert set(inspect(migration_db).get_table_names()) <= {"alembic_version"}

    command.upgrade(cfg, "head")
    assert set(Base.metadata.tables) <= set(inspect(migration_db).get_table_names())
