"""
Mock booking data: the driver roster and OTPs.

Nothing here is real -- a booking always "finds" one of three canned drivers
and the quoted fare / ETA come straight from settings.
"""

from __future__ import annotations

import random
from typing import Optional

from .entities import Driver

DRIVERS: tuple[Driver, ...] = (
    Driver(name="John Doe", vehicle="Toyota Prius", plate="AB12 CDE", rating=4.8),
    Driver(name="Sarah Smith", vehicle="Tesla Model 3", plate="XY98 ZYW", rating=4.9),
    Driver(name="Michael Brown", vehicle="Ford Mondeo", plate="LM45 NOP", rating=4.7),
)


def pick_driver(rng: Optional[random.Random] = None) -> Driver:
    return (rng or random).choice(DRIVERS)


def generate_otp(rng: Optional[random.Random] = None) -> str:
    """Return the 4-digit code the rider reads out to the driver."""
    return str((rng or random).randint(1000, 9999))

