"""Application Validators - reservation request checks

Checks run in a fixed order and the first failure wins. Format checks come
first, then the store-backed ones (room lookup, capacity, availability), so
no store access happens for a malformed request.
"""
import re
from datetime import date, datetime
from typing import Any, Callable, Optional

from pydantic import BaseModel

from application.availability import AvailabilityService
from domain.entities import Room
from domain.exceptions import ReservationError, ValidationError, NotFoundError, ConflictError
from domain.repositories import RecordStore
from domain.value_objects import ReservationRequest, TimeSlot, normalize_time

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# (attribute, field name as clients send it)
REQUIRED_FIELDS = [
    ("room_id", "roomId"),
    ("date", "date"),
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("user_name", "userName"),
    ("party_size", "partySize"),
]


class ValidationResult(BaseModel):
    """Outcome of validating a ReservationRequest"""
    error: Optional[ReservationError] = None
    room: Optional[Room] = None
    time_slot: Optional[TimeSlot] = None
    party_size: Optional[int] = None

    class Config:
        arbitrary_types_allowed = True

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def is_valid_date(value: str) -> bool:
    """Check for YYYY-MM-DD naming a real calendar day"""
    if not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def coerce_party_size(value: Any) -> Optional[int]:
    """Coerce a party size to int, or None if it is not a whole number"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str) or not _INTEGER_PATTERN.fullmatch(value.strip()):
        return None
    return int(value.strip())


def _is_blank(value) -> bool:
    return value is None or str(value).strip() == ""


class ReservationValidator:
    """Validates reservation requests against format and booking rules"""

    def __init__(self,
                 store: RecordStore,
                 availability: AvailabilityService,
                 today: Callable[[], date] = date.today):
        self.store = store
        self.availability = availability
        self.today = today

    async def validate(self, request: ReservationRequest) -> ValidationResult:
        """Run every check in order and report the first failure"""
        for attr, field_name in REQUIRED_FIELDS:
            if _is_blank(getattr(request, attr)):
                return self._fail(ValidationError(f"Field '{field_name}' is required"))

        if not is_valid_date(request.date):
            return self._fail(ValidationError("Invalid date format. Use YYYY-MM-DD"))

        start_time = normalize_time(request.start_time)
        end_time = normalize_time(request.end_time)
        if start_time is None or end_time is None:
            return self._fail(ValidationError("Invalid time format. Use HH:MM"))

        if start_time >= end_time:
            return self._fail(ValidationError("End time must be after start time"))
        time_slot = TimeSlot(start_time=start_time, end_time=end_time)

        # ISO dates order lexicographically
        if request.date < self.today().isoformat():
            return self._fail(ValidationError("Reservations cannot be made for past dates"))

        room = await self.store.find_room_by_id(request.room_id)
        if room is None:
            return self._fail(NotFoundError("Room not found"))

        party_size = coerce_party_size(request.party_size)
        if party_size is None:
            return self._fail(ValidationError("Party size must be an integer"))
        if party_size <= 0:
            return self._fail(ValidationError("Party size must be greater than 0"))
        if party_size > room.capacity:
            return self._fail(ValidationError(f"Room has a maximum capacity of {room.capacity} people"))

        if not await self.availability.is_available(
            room.id, request.date, time_slot.start_time, time_slot.end_time
        ):
            return self._fail(ConflictError("Room is not available in that time slot"))

        return ValidationResult(room=room, time_slot=time_slot, party_size=party_size)

    @staticmethod
    def _fail(error: ReservationError) -> ValidationResult:
        return ValidationResult(error=error)
