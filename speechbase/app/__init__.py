"""Application layer - FastAPI application and composition root."""

from speechbase.app.main import app, create_app, run_server

__all__ = ["app", "create_app", "run_server"]
