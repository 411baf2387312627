"""
Status advancement policies  (Strategy Pattern)
===============================================

Each poll of a ride's status asks the ride's policy whether the ride should
move one step forward in the fixed sequence.

* **CallCountPolicy**: advance once the rider has polled *N* times in the
  current status (N per status, counter restarts after every step).
* **ProbabilisticPolicy**: advance with a fixed probability on every poll.

Neither policy knows which status comes next; that lives on ``RideSession``.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from .enums import PolicyKind, RideStatus


# ── Strategy hierarchy ────────────────────────────────────────────────


class AdvancementPolicy(ABC):
    @abstractmethod
    def should_advance(self, status: RideStatus) -> bool: ...

    def reset(self) -> None:
        """Forget any progress made towards the next step."""


class CallCountPolicy(AdvancementPolicy):
    """Advance after a fixed number of polls per status."""

    DEFAULT_THRESHOLDS = {
        RideStatus.DRIVER_ASSIGNED: 3,
        RideStatus.DRIVER_ARRIVED: 2,
        RideStatus.IN_PROGRESS: 5,
    }

    def __init__(self, thresholds: Optional[dict[RideStatus, int]] = None):
        self.thresholds = dict(
            self.DEFAULT_THRESHOLDS if thresholds is None else thresholds
        )
        self.call_count = 0

    def should_advance(self, status: RideStatus) -> bool:
        self.call_count += 1
        threshold = self.thresholds.get(status)
        if threshold is None or self.call_count < threshold:
            return False
        self.call_count = 0
        return True

    def reset(self) -> None:
        self.call_count = 0


class ProbabilisticPolicy(AdvancementPolicy):
    """Advance on each poll with probability ``probability``."""

    def __init__(
        self, probability: float = 0.3, rng: Optional[random.Random] = None
    ):
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        self.probability = probability
        self.rng = rng or random.Random()

    def should_advance(self, status: RideStatus) -> bool:
        return self.rng.random() < self.probability


# ── Factory ───────────────────────────────────────────────────────────


def build_policy(settings, rng: Optional[random.Random] = None) -> AdvancementPolicy:
    """Build a fresh policy instance from application settings."""
    if settings.status_policy is PolicyKind.PROBABILITY:
        return ProbabilisticPolicy(settings.advance_probability, rng)
    return CallCountPolicy(
        {
            RideStatus.DRIVER_ASSIGNED: settings.driver_assigned_polls,
            RideStatus.DRIVER_ARRIVED: settings.driver_arrived_polls,
            RideStatus.IN_PROGRESS: settings.in_progress_polls,
        }
    )
