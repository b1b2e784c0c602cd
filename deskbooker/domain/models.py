"""Domain models for desk booking requests, bookings, and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class DeskBookingResultCode(str, Enum):
    SUCCESS = "SUCCESS"
    NO_DESK_AVAILABLE = "NO_DESK_AVAILABLE"


@dataclass(frozen=True)
class Desk:
    id: int
    description: str


@dataclass(frozen=True)
class DeskBookingRequest:
    first_name: str
    last_name: str
    email: str
    date: date


@dataclass(frozen=True)
class DeskBooking:
    first_name: str
    last_name: str
    email: str
    date: date
    desk_id: int
    id: Optional[int] = None


@dataclass(frozen=True)
class DeskBookingResult:
    first_name: str
    last_name: str
    email: str
    date: date
    code: DeskBookingResultCode
    desk_booking_id: Optional[int] = None


def booking_from_request(request: DeskBookingRequest, desk_id: int) -> DeskBooking:
    """Build an unsaved booking for `desk_id` from the requester fields."""
    return DeskBooking(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        date=request.date,
        desk_id=desk_id,
    )


def result_from_request(
    request: DeskBookingRequest,
    code: DeskBookingResultCode,
    desk_booking_id: Optional[int] = None,
) -> DeskBookingResult:
    return DeskBookingResult(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        date=request.date,
        code=code,
        desk_booking_id=desk_booking_id,
    )
