"""
App assembly entry point.

Builds the FastAPI `app` from environment configuration, e.g.
``uvicorn app:app``.
"""

from inventory.api.main import create_app

app = create_app()
