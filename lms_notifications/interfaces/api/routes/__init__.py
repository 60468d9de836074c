from fastapi import FastAPI

from .notifications import router as notifications_router
from .reminders import router as reminders_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(reminders_router)
    app.include_router(notifications_router)
