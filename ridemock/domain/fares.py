"""
End-of-ride fare breakdown.

The breakdown is canned: every completed ride costs the same subtotal and
only the rider's tip changes the total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BASE_FARE = 2.50
DISTANCE_CHARGE = 8.20
TIME_CHARGE = 2.30


@dataclass(frozen=True)
class FareBreakdown:
    base: float
    distance: float
    time: float
    subtotal: float
    tip: float
    total: float


def build_fare(tip: Optional[float] = None) -> FareBreakdown:
    tip = round(tip or 0.0, 2)
    subtotal = round(BASE_FARE + DISTANCE_CHARGE + TIME_CHARGE, 2)
    return FareBreakdown(
        base=BASE_FARE,
        distance=DISTANCE_CHARGE,
        time=TIME_CHARGE,
        subtotal=subtotal,
        tip=tip,
        total=round(subtotal + tip, 2),
    )
