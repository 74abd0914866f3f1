"""API Schemas - Request and Response DTOs

Field names on the wire are camelCase (``roomId``, ``startTime``...);
Python attributes stay snake_case.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base DTO with camelCase aliases"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ============================================================================
# ENVELOPES
# ============================================================================

class ApiResponse(BaseModel, Generic[T]):
    """Success envelope"""
    success: bool = True
    message: str
    data: T


class ErrorResponse(BaseModel):
    """Error envelope"""
    success: bool = False
    error: str


# ============================================================================
# ROOM SCHEMAS
# ============================================================================

class RoomResponse(CamelModel):
    """Room response DTO"""
    id: str
    name: str
    capacity: int


# ============================================================================
# RESERVATION SCHEMAS
# ============================================================================

class CreateReservationRequest(CamelModel):
    """Create reservation request DTO.

    Every field is optional here so that missing or blank values are
    reported by the reservation validator with a field-specific message.
    """
    room_id: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    user_name: Optional[str] = None
    party_size: Any = None


class ReservationResponse(CamelModel):
    """Reservation response DTO"""
    id: str
    room_id: str
    room_name: str
    date: str
    start_time: str
    end_time: str
    user_name: str
    party_size: int
    created_at: datetime
