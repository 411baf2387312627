"""FastAPI dependency injection helpers."""

from fastapi import Request

from ridemock.config import Settings
from ridemock.infrastructure.session_store import RideSessionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ride_store(request: Request) -> RideSessionStore:
    """Return the ride session store owned by the running app."""
    return request.app.state.ride_store
