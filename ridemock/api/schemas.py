"""Pydantic request / response schemas for the REST API.

The demo front end speaks camelCase, so every model is aliased with
``to_camel`` while Python code keeps snake_case attribute names.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ──────────────────────────────────────────────────────────


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignupRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class BookRequest(CamelModel):
    pickup: Optional[Any] = None
    destination: Optional[Any] = None
    vehicle_type: Optional[str] = None


class ResetRideRequest(CamelModel):
    booking_id: Optional[str] = None


class CompleteRideRequest(CamelModel):
    booking_id: Optional[str] = None
    rating: Optional[float] = None
    tip: Optional[float] = None
    feedback: Optional[str] = None


# ── Responses ─────────────────────────────────────────────────────────


class UserResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class AuthResponse(CamelModel):
    success: bool = True
    token: str
    user: UserResponse


class DriverResponse(CamelModel):
    name: str
    vehicle: str
    plate: str
    rating: float

    model_config = ConfigDict(from_attributes=True)


class BookResponse(CamelModel):
    success: bool = True
    booking_id: str
    status: str
    otp: str
    driver: DriverResponse
    eta: str
    fare: float
    pickup: Optional[Any] = None
    destination: Optional[Any] = None
    vehicle_type: Optional[str] = None


class LocationResponse(CamelModel):
    lat: float
    lng: float


class RideStatusResponse(CamelModel):
    status: str
    location: LocationResponse


class ResetRideResponse(CamelModel):
    success: bool = True
    status: str


class FareResponse(CamelModel):
    base: float
    distance: float
    time: float
    subtotal: float
    tip: float
    total: float

    model_config = ConfigDict(from_attributes=True)


class ReceiptResponse(CamelModel):
    booking_id: Optional[str] = None
    date: str
    rating: Optional[float] = None
    feedback: Optional[str] = None


class CompleteRideResponse(CamelModel):
    success: bool = True
    fare: FareResponse
    receipt: ReceiptResponse


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
