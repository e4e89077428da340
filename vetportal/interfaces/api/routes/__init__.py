from fastapi import FastAPI

from .appointments import doctors_router
from .appointments import router as appointments_router
from .clients import router as clients_router
from .dashboard import router as dashboard_router
from .notifications import router as notifications_router
from .owners import router as owners_router
from .pets import router as pets_router
from .profile import router as profile_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(pets_router)
    app.include_router(owners_router)
    app.include_router(clients_router)
    app.include_router(appointments_router)
    app.include_router(doctors_router)
    app.include_router(dashboard_router)
    app.include_router(notifications_router)
    app.include_router(profile_router)
