"""Desk booking decision service."""

from __future__ import annotations

from typing import Optional

from deskbooker.domain.interfaces import DeskBookingRepository, DeskRepository
from deskbooker.domain.models import (
    DeskBookingRequest,
    DeskBookingResult,
    DeskBookingResultCode,
    booking_from_request,
    result_from_request,
)
from deskbooker.utils.logger import get_logger


logger = get_logger(__name__)


class MissingArgumentError(ValueError):
    """Raised when a required argument is absent."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Value cannot be None (parameter '{param_name}')")
        self.param_name = param_name


class DeskBookingRequestService:
    """Books the first desk the inventory reports as free on the requested date."""

    def __init__(
        self,
        desk_booking_repository: DeskBookingRepository,
        desk_repository: DeskRepository,
    ) -> None:
        self._desk_booking_repository = desk_booking_repository
        self._desk_repository = desk_repository

    def book_desk(self, request: Optional[DeskBookingRequest]) -> DeskBookingResult:
        if request is None:
            raise MissingArgumentError("request")

        available_desks = self._desk_repository.get_available_desks(request.date)
        if not available_desks:
            logger.info("No desk available on %s", request.date.isoformat())
            return result_from_request(request, DeskBookingResultCode.NO_DESK_AVAILABLE)

        desk = available_desks[0]
        booking = booking_from_request(request, desk_id=desk.id)
        booking_id = self._desk_booking_repository.save(booking)
        logger.info(
            "Booked desk %s on %s as booking %s",
            desk.id,
            request.date.isoformat(),
            booking_id,
        )
        return result_from_request(
            request,
            DeskBookingResultCode.SUCCESS,
            desk_booking_id=booking_id,
        )
