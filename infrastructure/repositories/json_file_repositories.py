"""JSON File Repository Implementation

Rooms and reservations live in two JSON files, each holding an array of
flat camelCase objects. File access runs in a worker thread so the event
loop is never blocked. Every mutation rewrites the reservation file as a
whole; writes go to a temporary file in the same directory which then
replaces the original, so readers never see a half-written collection.
"""
import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError as SchemaError

from domain.repositories import RecordStore
from domain.entities import Room, Reservation
from domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileRecordStore(RecordStore):
    """RecordStore backed by ``rooms.json`` and ``reservations.json``"""

    def __init__(self, rooms_path: Union[str, Path], reservations_path: Union[str, Path]):
        super().__init__()
        self.rooms_path = Path(rooms_path)
        self.reservations_path = Path(reservations_path)

    async def get_rooms(self) -> List[Room]:
        """Find all rooms.

        Rooms are read-only seed data, so an unreadable rooms file is
        logged and treated as an empty catalog instead of failing reads.
        """
        try:
            data = await asyncio.to_thread(self._read, self.rooms_path)
            return [Room.model_validate(item) for item in data]
        except (StorageError, SchemaError) as e:
            logger.error("Error reading rooms from %s: %s", self.rooms_path, e)
            return []

    async def get_reservations(self) -> List[Reservation]:
        """Find all reservations.

        A missing file is an empty collection. A corrupt one raises
        StorageError: overwriting it on the next save would lose data.
        """
        if not self.reservations_path.exists():
            return []
        data = await asyncio.to_thread(self._read, self.reservations_path)
        try:
            return [Reservation.model_validate(item) for item in data]
        except SchemaError as e:
            logger.error("Invalid reservation record in %s: %s", self.reservations_path, e)
            raise StorageError("Reservation store is corrupt") from e

    async def save_reservations(self, reservations: List[Reservation]) -> None:
        """Atomically overwrite the reservation file"""
        payload = [r.model_dump(mode="json", by_alias=True) for r in reservations]
        await asyncio.to_thread(self._write, self.reservations_path, payload)
        logger.debug("Saved %d reservations to %s", len(reservations), self.reservations_path)

    # ==================== FILE HELPERS ====================
    @staticmethod
    def _read(path: Path) -> list:
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error("Error reading file %s: %s", path, e)
            raise StorageError(f"Could not read {path.name}") from e
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {path.name}")
        return data

    @staticmethod
    def _write(path: Path, data: list) -> None:
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error("Error writing file %s: %s", path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {path.name}") from e
