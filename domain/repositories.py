"""Domain Repository Interfaces"""
import asyncio
import random
import string
import time
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Room, Reservation


class RecordStore(ABC):
    """Repository interface for the Room and Reservation collections.

    Reservations are read and written as a whole collection. Callers that
    read, check and then write must hold ``write_lock`` for the entire
    cycle so that concurrent writers cannot interleave.
    """

    def __init__(self):
        self._write_lock = asyncio.Lock()

    @property
    def write_lock(self) -> asyncio.Lock:
        """Lock serializing read-check-write cycles on this store"""
        return self._write_lock

    @abstractmethod
    async def get_rooms(self) -> List[Room]:
        """Find all rooms, in stored order"""
        pass

    async def find_room_by_id(self, room_id: str) -> Optional[Room]:
        """Find room by ID"""
        for room in await self.get_rooms():
            if room.id == room_id:
                return room
        return None

    @abstractmethod
    async def get_reservations(self) -> List[Reservation]:
        """Find all reservations, any room, any date"""
        pass

    async def find_reservation_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """Find reservation by ID"""
        for reservation in await self.get_reservations():
            if reservation.id == reservation_id:
                return reservation
        return None

    @abstractmethod
    async def save_reservations(self, reservations: List[Reservation]) -> None:
        """Replace the whole reservation collection"""
        pass

    def generate_reservation_id(self) -> str:
        """Generate unique reservation ID"""
        suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=9))
        return f"res-{time.time_ns() // 1_000_000}-{suffix}"
