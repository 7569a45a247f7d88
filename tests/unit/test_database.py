import pytest

from inventory.db.database import SQLITE_MEMORY_URL, build_engine, get_database_url

_DB_VARS = [
    "INVENTORY_TEST_DB",
    "DATABASE_URL",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
]


@pytest.fixture
def clean_env(monkeypatch):
    for var in _DB_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_url_is_assembled_from_postgres_components(clean_env):
    clean_env.setenv("POSTGRES_USER", "inv")
    clean_env.setenv("POSTGRES_PASSWORD", "secret")
    clean_env.setenv("POSTGRES_HOST", "db")
    clean_env.setenv("POSTGRES_PORT", "5432")
    clean_env.setenv("POSTGRES_DB", "inventory")

    assert get_database_url() == "postgresql://inv:secret@db:5432/inventory"


def test_missing_components_are_named(clean_env):
    clean_env.setenv("POSTGRES_USER", "inv")
    clean_env.setenv("POSTGRES_HOST", "db")

    with pytest.raises(ValueError) as excinfo:
        get_database_url()

    message = str(excinfo.value)
    assert "POSTGRES_PASSWORD" in message
    assert "POSTGRES_PORT" in message
    assert "POSTGRES_DB" in message
    assert "POSTGRES_USER" not in message


def test_explicit_urls_take_precedence(clean_env):
    clean_env.setenv("DATABASE_URL", "postgresql://a:b@c:1/d")
    assert get_database_url() == "postgresql://a:b@c:1/d"

    clean_env.setenv("INVENTORY_TEST_DB", "sqlite:///./test.db")
    assert get_database_url() == "sqlite:///./test.db"


def test_sqlite_engine_enforces_foreign_keys():
    engine = build_engine(SQLITE_MEMORY_URL)
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    finally:
        engine.dispose()
