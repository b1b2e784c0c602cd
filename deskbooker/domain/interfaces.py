"""Storage-facing contracts consumed by the booking service."""

from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from deskbooker.domain.models import Desk, DeskBooking


class DeskRepository(Protocol):
    def get_available_desks(self, date: date) -> Sequence[Desk]:
        """Return desks free on exactly `date`, in provider order."""
        ...


class DeskBookingRepository(Protocol):
    def save(self, booking: DeskBooking) -> int:
        """Persist `booking` and return the identifier assigned to it."""
        ...
