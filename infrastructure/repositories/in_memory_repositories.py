"""In-Memory Repository Implementations"""
from typing import Optional, List, Iterable

from domain.repositories import RecordStore
from domain.entities import Room, Reservation


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of RecordStore"""

    def __init__(self, rooms: Optional[Iterable[Room]] = None,
                 reservations: Optional[Iterable[Reservation]] = None):
        super().__init__()
        self._rooms: List[Room] = list(rooms or [])
        self._reservations: List[Reservation] = list(reservations or [])

    async def get_rooms(self) -> List[Room]:
        """Find all rooms"""
        return list(self._rooms)

    async def get_reservations(self) -> List[Reservation]:
        """Find all reservations"""
        return list(self._reservations)

    async def save_reservations(self, reservations: List[Reservation]) -> None:
        """Replace stored reservations"""
        self._reservations = list(reservations)
