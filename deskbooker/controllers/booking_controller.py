"""HTTP controller layer for desk booking."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field, field_validator

from deskbooker.controllers.dependencies import get_booking_service, get_repository
from deskbooker.domain.models import DeskBookingRequest, DeskBookingResultCode
from deskbooker.repository.data_repository import DataRepository
from deskbooker.services.booking_service import DeskBookingRequestService, MissingArgumentError
from deskbooker.utils.logger import get_logger


logger = get_logger(__name__)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

router = APIRouter(tags=["booking"])


class BookDeskRequest(BaseModel):
    """Input DTO validated before entering service layer."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=254)
    date: date

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped

    def to_domain(self) -> DeskBookingRequest:
        return DeskBookingRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            date=self.date,
        )


class BookDeskResponse(BaseModel):
    first_name: str
    last_name: str
    email: str
    date: date
    desk_booking_id: Optional[int] = Field(default=None, gt=0)
    code: DeskBookingResultCode


class DeskResponse(BaseModel):
    id: int = Field(gt=0)
    description: str


class AvailableDesksResponse(BaseModel):
    date: date
    desks: list[DeskResponse]


class DeskBookingResponse(BaseModel):
    id: int = Field(gt=0)
    first_name: str
    last_name: str
    email: str
    date: date
    desk_id: int = Field(gt=0)


@router.post(
    "/book_desk",
    response_model=BookDeskResponse,
    status_code=status.HTTP_200_OK,
)
async def book_desk(
    payload: BookDeskRequest,
    service: DeskBookingRequestService = Depends(get_booking_service),
) -> BookDeskResponse:
    """Reserve the first free desk; a full office is a normal outcome, not an error."""
    try:
        result = service.book_desk(payload.to_domain())
        return BookDeskResponse(
            first_name=result.first_name,
            last_name=result.last_name,
            email=result.email,
            date=result.date,
            desk_booking_id=result.desk_booking_id,
            code=result.code,
        )
    except MissingArgumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book desk",
        ) from exc


@router.get(
    "/available_desks",
    response_model=AvailableDesksResponse,
    status_code=status.HTTP_200_OK,
)
async def available_desks(
    booking_date: date = Query(alias="date"),
    repository: DataRepository = Depends(get_repository),
) -> AvailableDesksResponse:
    desks = repository.get_available_desks(booking_date)
    return AvailableDesksResponse(
        date=booking_date,
        desks=[DeskResponse(id=desk.id, description=desk.description) for desk in desks],
    )


@router.get(
    "/desk_bookings/{booking_id}",
    response_model=DeskBookingResponse,
    status_code=status.HTTP_200_OK,
)
async def get_desk_booking(
    booking_id: int,
    repository: DataRepository = Depends(get_repository),
) -> DeskBookingResponse:
    booking = repository.get_desk_booking(booking_id)
    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Desk booking {booking_id} not found",
        )
    return DeskBookingResponse(
        id=booking.id,
        first_name=booking.first_name,
        last_name=booking.last_name,
        email=booking.email,
        date=booking.date,
        desk_id=booking.desk_id,
    )
