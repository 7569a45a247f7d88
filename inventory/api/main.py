"""
FastAPI app assembly: logging, middleware and router wiring.

`create_app` takes an optional session factory so tests and embedding
callers can inject their own store; without one it builds an engine from
the environment.
"""
import logging
import os
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from inventory.db.database import build_engine, build_session_factory, init_db
from inventory.api.categories import router as categories_router
from inventory.api.suppliers import router as suppliers_router
from inventory.api.products import router as products_router
from inventory.api.orders import router as orders_router
from inventory.api.roles import router as roles_router
from inventory.api.users import router as users_router
from inventory.api.reports import router as reports_router

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)


def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


def create_app(session_factory: Optional[sessionmaker] = None) -> FastAPI:
    if session_factory is None:
        engine = build_engine()
        # Schema is managed by Alembic except for throwaway SQLite databases
        if engine.dialect.name == "sqlite":
            init_db(engine)
        session_factory = build_session_factory(engine)

    app = FastAPI(
        title="Inventory Service",
        description="API for managing products, categories, suppliers, orders, roles and users.",
        version="1.0.0",
    )
    app.state.session_factory = session_factory

    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        categories_router,
        suppliers_router,
        products_router,
        orders_router,
        roles_router,
        users_router,
        reports_router,
    ):
        app.include_router(router)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "inventory-service"}

    logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)
    return app
