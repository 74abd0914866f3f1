"""Domain Value Objects"""
import re
from pydantic import BaseModel, validator
from typing import Any, Optional

_TIME_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")


def normalize_time(value: str) -> Optional[str]:
    """Return ``value`` as zero-padded HH:MM, or None if it is not a valid time"""
    match = _TIME_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    return f"{int(match.group(1)):02d}:{match.group(2)}"


class TimeSlot(BaseModel):
    """Value Object for a same-day [start_time, end_time) interval"""
    start_time: str
    end_time: str

    @validator('start_time', 'end_time')
    def zero_padded(cls, v):
        normalized = normalize_time(v)
        if normalized is None:
            raise ValueError('Invalid time format. Use HH:MM')
        return normalized

    @validator('end_time')
    def end_after_start(cls, v, values):
        if 'start_time' in values and v <= values['start_time']:
            raise ValueError('End time must be after start time')
        return v

    def conflicts_with(self, other: "TimeSlot") -> bool:
        """Check whether this slot collides with an already booked one.

        Zero-padded HH:MM strings order the same way as the times they
        denote, so plain string comparison is used. The third clause
        catches exact matches and supersets of the booked slot.
        """
        return (
            (other.start_time <= self.start_time < other.end_time)
            or (other.start_time < self.end_time <= other.end_time)
            or (self.start_time <= other.start_time and self.end_time >= other.end_time)
        )

    class Config:
        frozen = True


class ReservationRequest(BaseModel):
    """Raw reservation input, before validation"""
    room_id: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    user_name: Optional[str] = None
    party_size: Any = None

    class Config:
        frozen = True
