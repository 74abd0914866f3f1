"""API Dependencies - store and service providers"""
from fastapi import Depends

from core.config import settings
from domain.repositories import RecordStore
from infrastructure.repositories.json_file_repositories import JsonFileRecordStore
from application.services import ReservationService, RoomService

# One store per process: its write lock is what serializes mutations
record_store = JsonFileRecordStore(settings.rooms_path, settings.reservations_path)


def get_record_store() -> RecordStore:
    return record_store


def get_room_service(store: RecordStore = Depends(get_record_store)) -> RoomService:
    return RoomService(store)


def get_reservation_service(store: RecordStore = Depends(get_record_store)) -> ReservationService:
    return ReservationService(store)
