"""Domain Entities - Aggregates"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone

from domain.value_objects import TimeSlot


class Room(BaseModel):
    """Room Entity - a bookable space with a fixed capacity"""
    id: str
    name: str
    capacity: int = Field(gt=0)

    class Config:
        from_attributes = True
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity"""

    # Identity
    id: str

    # Reference to Room, plus a snapshot of its name at booking time
    room_id: str
    room_name: str

    # Slot
    date: str
    start_time: str
    end_time: str

    # Booking party
    user_name: str
    party_size: int = Field(gt=0)

    # Metadata
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        reservation_id: str,
        room: Room,
        date: str,
        time_slot: TimeSlot,
        user_name: str,
        party_size: int
    ) -> "Reservation":
        """Build a new reservation for an already validated request"""
        return Reservation(
            id=reservation_id,
            room_id=room.id,
            room_name=room.name,
            date=date,
            start_time=time_slot.start_time,
            end_time=time_slot.end_time,
            user_name=user_name,
            party_size=party_size
        )

    # ==================== QUERY METHODS ====================
    @property
    def time_slot(self) -> TimeSlot:
        # stored records were validated on the way in
        return TimeSlot.model_construct(start_time=self.start_time, end_time=self.end_time)

    def is_for(self, room_id: str, date: str) -> bool:
        """Check if reservation books ``room_id`` on ``date``"""
        return self.room_id == room_id and self.date == date
