"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from ridemock.domain.entities import DEFAULT_LOCATION
from ridemock.domain.enums import PolicyKind


class Settings(BaseSettings):
    # Booking
    booking_delay_seconds: float = 1.0  # artificial "finding a driver" wait
    quoted_fare: float = 15.50
    quoted_eta: str = "5 mins"

    # Status simulation
    status_policy: PolicyKind = PolicyKind.CALL_COUNT
    driver_assigned_polls: int = 3
    driver_arrived_polls: int = 2
    in_progress_polls: int = 5
    advance_probability: float = 0.3
    max_unbooked_sessions: int = 100  # polls for ids that were never booked

    # Mock driver position
    mock_lat: float = DEFAULT_LOCATION.lat
    mock_lng: float = DEFAULT_LOCATION.lng

    # HTTP
    cors_origins: list[str] = ["*"]
    rate_limit: str = "100/minute"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
