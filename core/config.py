"""
Application settings (Pydantic Settings).

Values come from environment variables or a ``.env`` file in the project
root, e.g. ``DATA_DIR=/var/lib/rooms`` or ``LOG_LEVEL=DEBUG``.
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

_project_root = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    project_name: str = "Room Reservation API"
    api_version: str = "1.0.0"

    # Flat-file storage
    data_dir: Path = _project_root / "data"
    rooms_file: str = "rooms.json"
    reservations_file: str = "reservations.json"

    log_level: str = "INFO"
    log_file: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 3000

    class Config:
        env_file = _project_root / ".env"
        extra = "ignore"

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.rooms_file

    @property
    def reservations_path(self) -> Path:
        return self.data_dir / self.reservations_file


settings = Settings()
