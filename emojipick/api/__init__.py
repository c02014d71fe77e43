"""FastAPI router for emojipick."""

from emojipick.api.routes import create_router

__all__ = ["create_router"]
