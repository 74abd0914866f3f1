"""Application Services - Business use cases"""
import logging
from typing import Any, List, Optional

from application.availability import AvailabilityService
from application.validators import ReservationValidator
from domain.entities import Room, Reservation
from domain.exceptions import NotFoundError
from domain.repositories import RecordStore
from domain.value_objects import ReservationRequest

logger = logging.getLogger(__name__)


class RoomService:
    """Service for the read-only room catalog"""

    def __init__(self, store: RecordStore):
        self.store = store

    async def get_rooms(self) -> List[Room]:
        """Get all rooms"""
        return await self.store.get_rooms()

    async def get_room(self, room_id: str) -> Room:
        """Get room by ID"""
        room = await self.store.find_room_by_id(room_id)
        if room is None:
            raise NotFoundError("Room not found")
        return room


class ReservationService:
    """Service for Reservation business use cases"""

    def __init__(self,
                 store: RecordStore,
                 availability: Optional[AvailabilityService] = None,
                 validator: Optional[ReservationValidator] = None):
        self.store = store
        self.availability = availability or AvailabilityService(store)
        self.validator = validator or ReservationValidator(store, self.availability)

    async def create_reservation(
        self,
        room_id: Optional[str],
        date: Optional[str],
        start_time: Optional[str],
        end_time: Optional[str],
        user_name: Optional[str],
        party_size: Any
    ) -> Reservation:
        """Create new reservation with full validation.

        Validation, the availability check and the write happen under the
        store's write lock, so a concurrent request cannot book the same
        slot between the check and the save.
        """
        request = ReservationRequest(
            room_id=room_id,
            date=date,
            start_time=start_time,
            end_time=end_time,
            user_name=user_name,
            party_size=party_size
        )

        async with self.store.write_lock:
            result = await self.validator.validate(request)
            if not result.is_valid:
                logger.info("Reservation rejected for room %s on %s: %s",
                            room_id, date, result.error.message)
                result.raise_for_error()

            reservation = Reservation.create(
                reservation_id=self.store.generate_reservation_id(),
                room=result.room,
                date=request.date,
                time_slot=result.time_slot,
                user_name=request.user_name,
                party_size=result.party_size
            )

            reservations = await self.store.get_reservations()
            reservations.append(reservation)
            await self.store.save_reservations(reservations)

        logger.info("Created reservation %s for room %s on %s %s-%s",
                    reservation.id, reservation.room_id, reservation.date,
                    reservation.start_time, reservation.end_time)
        return reservation

    async def get_all_reservations(self) -> List[Reservation]:
        """Get all reservations"""
        return await self.store.get_reservations()

    async def get_reservation(self, reservation_id: str) -> Reservation:
        """Get reservation by ID"""
        reservation = await self.store.find_reservation_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation

    async def get_reservations_by_room(self, room_id: str) -> List[Reservation]:
        """Get all reservations for a room"""
        room = await self.store.find_room_by_id(room_id)
        if room is None:
            raise NotFoundError("Room not found")

        reservations = await self.store.get_reservations()
        return [r for r in reservations if r.room_id == room.id]

    async def cancel_reservation(self, reservation_id: str) -> Reservation:
        """Cancel reservation and return the removed record"""
        async with self.store.write_lock:
            reservations = await self.store.get_reservations()
            for index, reservation in enumerate(reservations):
                if reservation.id == reservation_id:
                    break
            else:
                raise NotFoundError("Reservation not found")

            canceled = reservations.pop(index)
            await self.store.save_reservations(reservations)

        logger.info("Canceled reservation %s for room %s on %s",
                    canceled.id, canceled.room_id, canceled.date)
        return canceled
