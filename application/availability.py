"""Application Services - room availability"""
from typing import List

from domain.entities import Reservation
from domain.repositories import RecordStore
from domain.value_objects import TimeSlot


class AvailabilityService:
    """Decides whether a time slot is free for a room on a date"""

    def __init__(self, store: RecordStore):
        self.store = store

    async def find_conflicts(
        self,
        room_id: str,
        date: str,
        start_time: str,
        end_time: str
    ) -> List[Reservation]:
        """Get reservations on the same room and date that collide with the slot"""
        requested = TimeSlot.model_construct(start_time=start_time, end_time=end_time)
        reservations = await self.store.get_reservations()
        return [
            r for r in reservations
            if r.is_for(room_id, date) and requested.conflicts_with(r.time_slot)
        ]

    async def is_available(
        self,
        room_id: str,
        date: str,
        start_time: str,
        end_time: str
    ) -> bool:
        """Check if the room is free for [start_time, end_time) on date"""
        conflicts = await self.find_conflicts(room_id, date, start_time, end_time)
        return not conflicts
