"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``RideSession``: enforces the forward-only lifecycle
  (driver_assigned -> driver_arrived -> in_progress -> completed).
- The decision *when* to step forward is delegated to an
  ``AdvancementPolicy`` (see ``policies.py``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .enums import RIDE_SEQUENCE, RIDE_TRANSITIONS, RideStatus
from .policies import AdvancementPolicy, CallCountPolicy

logger = logging.getLogger(__name__)


class InvalidStateTransition(Exception):
    """Raised when a ride status change violates the state machine."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


# Where every mock driver is reported to be (central London)
DEFAULT_LOCATION = Location(51.5074, -0.1278)


@dataclass(frozen=True)
class Driver:
    name: str
    vehicle: str
    plate: str
    rating: float


@dataclass(frozen=True)
class StatusSnapshot:
    status: RideStatus
    location: Location


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class RideSession:
    booking_id: Optional[str] = None
    status: RideStatus = RideStatus.DRIVER_ASSIGNED
    policy: AdvancementPolicy = field(default_factory=CallCountPolicy)
    location: Location = DEFAULT_LOCATION
    driver: Optional[Driver] = None
    otp: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == RideStatus.COMPLETED

    def transition_to(self, new_status: RideStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = RIDE_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition from {self.status} to {new_status}"
            )
        logger.info(
            "Ride %s: %s -> %s",
            self.booking_id, self.status.value, new_status.value,
        )
        self.status = new_status

    def advance(self) -> RideStatus:
        """Register one status poll; step forward if the policy says so."""
        if self.is_completed:
            return self.status
        if self.policy.should_advance(self.status):
            nxt = RIDE_SEQUENCE[RIDE_SEQUENCE.index(self.status) + 1]
            self.transition_to(nxt)
        return self.status

    def reset(self) -> None:
        self.status = RideStatus.DRIVER_ASSIGNED
        self.policy.reset()

    def current(self) -> StatusSnapshot:
        return StatusSnapshot(status=self.status, location=self.location)
