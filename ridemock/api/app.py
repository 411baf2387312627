"""
FastAPI application factory.

* Registers routes for auth, rides and admin under ``/api``.
* Owns the per-app ``RideSessionStore`` (``app.state.ride_store``).
* Applies open CORS and rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
import random
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ridemock.api.errors import MissingFieldsError, missing_fields_handler
from ridemock.api.middleware import build_limiter
from ridemock.api.routes import admin, auth, rides
from ridemock.config import Settings, settings as default_settings
from ridemock.infrastructure.session_store import RideSessionStore

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s = app.state.settings
    logger.info(
        "Ride simulator ready (policy=%s, booking delay=%.1fs)",
        s.status_policy.value, s.booking_delay_seconds,
    )
    yield
    logger.info("Ride simulator stopped with %d booked rides", len(app.state.ride_store))


def create_app(
    settings: Optional[Settings] = None, rng: Optional[random.Random] = None
) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Ride Hailing Mock API",
        description=(
            "Mock backend for the ride-hailing front-end demo.  Books rides "
            "with canned drivers and walks each ride through "
            "driver_assigned -> driver_arrived -> in_progress -> completed "
            "as the client polls its status."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.ride_store = RideSessionStore(settings, rng)

    # Rate limiter
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Added last so 429s carry CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MissingFieldsError, missing_fields_handler)

    # Routers
    app.include_router(auth.router, prefix="/api")
    app.include_router(rides.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    return app
