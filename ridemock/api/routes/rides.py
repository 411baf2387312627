"""
Ride endpoints
==============

POST /api/book          -- book a ride (after an artificial delay)
GET  /api/ride-status   -- poll a ride; each poll may advance its status
POST /api/reset-ride    -- put a ride back to driver_assigned
POST /api/complete-ride -- rate / tip a finished ride and get the receipt

``bookingId`` is optional everywhere; without it the most recently booked
ride is used.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ridemock.api.dependencies import get_ride_store, get_settings
from ridemock.api.schemas import (
    BookRequest,
    BookResponse,
    CompleteRideRequest,
    CompleteRideResponse,
    DriverResponse,
    FareResponse,
    LocationResponse,
    ReceiptResponse,
    ResetRideRequest,
    ResetRideResponse,
    RideStatusResponse,
)
from ridemock.config import Settings
from ridemock.domain.booking import generate_otp, pick_driver
from ridemock.domain.fares import build_fare
from ridemock.infrastructure.session_store import RideSessionStore

router = APIRouter(tags=["rides"])


@router.post(
    "/book",
    response_model=BookResponse,
    summary="Book a ride",
    description="Waits ``booking_delay_seconds`` then assigns a random mock driver.",
)
async def book_ride(
    body: Optional[BookRequest] = None,
    store: RideSessionStore = Depends(get_ride_store),
    settings: Settings = Depends(get_settings),
):
    body = body or BookRequest()
    if settings.booking_delay_seconds > 0:
        await asyncio.sleep(settings.booking_delay_seconds)

    ride = store.create(
        store.new_booking_id(),
        driver=pick_driver(store.rng),
        otp=generate_otp(store.rng),
    )
    return BookResponse(
        booking_id=ride.booking_id,
        status=ride.status.value,
        otp=ride.otp,
        driver=DriverResponse.model_validate(ride.driver),
        eta=settings.quoted_eta,
        fare=settings.quoted_fare,
        pickup=body.pickup,
        destination=body.destination,
        vehicle_type=body.vehicle_type,
    )


@router.get(
    "/ride-status",
    response_model=RideStatusResponse,
    summary="Poll ride status",
)
async def ride_status(
    booking_id: Optional[str] = Query(None, alias="bookingId"),
    store: RideSessionStore = Depends(get_ride_store),
):
    ride = store.get_or_create(booking_id)
    ride.advance()
    snapshot = ride.current()
    return RideStatusResponse(
        status=snapshot.status.value,
        location=LocationResponse(lat=snapshot.location.lat, lng=snapshot.location.lng),
    )


@router.post(
    "/reset-ride",
    response_model=ResetRideResponse,
    summary="Reset a ride to driver_assigned",
)
async def reset_ride(
    body: Optional[ResetRideRequest] = None,
    store: RideSessionStore = Depends(get_ride_store),
):
    ride = store.reset(body.booking_id if body else None)
    return ResetRideResponse(status=ride.status.value)


@router.post(
    "/complete-ride",
    response_model=CompleteRideResponse,
    summary="Finish a ride and get the fare receipt",
)
async def complete_ride(body: Optional[CompleteRideRequest] = None):
    body = body or CompleteRideRequest()
    fare = build_fare(body.tip)
    return CompleteRideResponse(
        fare=FareResponse.model_validate(fare),
        receipt=ReceiptResponse(
            booking_id=body.booking_id,
            date=datetime.now(timezone.utc).isoformat(),
            rating=body.rating,
            feedback=body.feedback,
        ),
    )
