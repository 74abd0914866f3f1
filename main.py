import logging
from typing import List

from fastapi import FastAPI, Depends

from api.schemas import (
    ApiResponse, ErrorResponse,
    RoomResponse,
    CreateReservationRequest, ReservationResponse
)
from api.dependencies import get_room_service, get_reservation_service
from api.errors import register_error_handlers
from api.middleware import register_middleware
from application.services import RoomService, ReservationService
from core.config import settings
from core.logging_config import setup_logging

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

ENDPOINTS = {
    "GET /api/rooms": "List all rooms",
    "GET /api/rooms/:id": "Get a single room",
    "GET /api/rooms/:id/reservations": "List the reservations of a room",
    "GET /api/reservations": "List all reservations",
    "GET /api/reservations/:id": "Get a single reservation",
    "POST /api/reservations": "Create a reservation",
    "DELETE /api/reservations/:id": "Cancel a reservation",
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

app = FastAPI(
    title=settings.project_name,
    description="REST API for booking study and meeting rooms by time slot",
    version=settings.api_version
)

register_middleware(app)
register_error_handlers(app)


@app.on_event("startup")
async def log_endpoints():
    logger.info("%s %s started", settings.project_name, settings.api_version)
    for route, description in ENDPOINTS.items():
        logger.info("  %-32s %s", route, description)

# ============================================================================
# HEALTH & DOCUMENTATION ENDPOINTS
# ============================================================================

@app.get("/", tags=["Documentation"])
async def api_documentation():
    """Describe the API and its endpoints"""
    return {
        "title": settings.project_name,
        "version": settings.api_version,
        "description": "REST API for managing room reservations in a library or coworking space",
        "endpoints": ENDPOINTS,
        "examples": {
            "Create reservation": {
                "method": "POST",
                "url": "/api/reservations",
                "body": {
                    "roomId": "sala-001",
                    "date": "2025-06-29",
                    "startTime": "09:00",
                    "endTime": "11:00",
                    "userName": "Jane Doe",
                    "partySize": 3
                }
            }
        }
    }

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.get("/api/rooms", response_model=ApiResponse[List[RoomResponse]], tags=["Rooms"])
async def get_rooms(service: RoomService = Depends(get_room_service)):
    """Get all rooms"""
    rooms = await service.get_rooms()
    return _envelope([_room_to_response(r) for r in rooms], "Rooms retrieved successfully")

@app.get("/api/rooms/{room_id}", response_model=ApiResponse[RoomResponse],
         responses=ERROR_RESPONSES, tags=["Rooms"])
async def get_room(room_id: str, service: RoomService = Depends(get_room_service)):
    """Get room by ID"""
    room = await service.get_room(room_id)
    return _envelope(_room_to_response(room), "Room retrieved successfully")

@app.get("/api/rooms/{room_id}/reservations", response_model=ApiResponse[List[ReservationResponse]],
         responses=ERROR_RESPONSES, tags=["Rooms"])
async def get_room_reservations(
    room_id: str,
    rooms: RoomService = Depends(get_room_service),
    service: ReservationService = Depends(get_reservation_service)
):
    """Get all reservations for a room"""
    room = await rooms.get_room(room_id)
    reservations = await service.get_reservations_by_room(room.id)
    return _envelope(
        [_reservation_to_response(r) for r in reservations],
        f"Reservations for room {room.name} retrieved successfully"
    )

# ============================================================================
# RESERVATION ENDPOINTS
# ============================================================================

@app.post("/api/reservations", response_model=ApiResponse[ReservationResponse], status_code=201,
          responses=ERROR_RESPONSES, tags=["Reservations"])
async def create_reservation(
    request: CreateReservationRequest,
    service: ReservationService = Depends(get_reservation_service)
):
    """Create new reservation"""
    reservation = await service.create_reservation(
        room_id=request.room_id,
        date=request.date,
        start_time=request.start_time,
        end_time=request.end_time,
        user_name=request.user_name,
        party_size=request.party_size
    )
    return _envelope(_reservation_to_response(reservation), "Reservation created successfully")

@app.get("/api/reservations", response_model=ApiResponse[List[ReservationResponse]],
         responses=ERROR_RESPONSES, tags=["Reservations"])
async def get_all_reservations(service: ReservationService = Depends(get_reservation_service)):
    """Get all reservations"""
    reservations = await service.get_all_reservations()
    return _envelope([_reservation_to_response(r) for r in reservations], "Reservations retrieved successfully")

@app.get("/api/reservations/{reservation_id}", response_model=ApiResponse[ReservationResponse],
         responses=ERROR_RESPONSES, tags=["Reservations"])
async def get_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get reservation by ID"""
    reservation = await service.get_reservation(reservation_id)
    return _envelope(_reservation_to_response(reservation), "Reservation retrieved successfully")

@app.delete("/api/reservations/{reservation_id}", response_model=ApiResponse[ReservationResponse],
            responses=ERROR_RESPONSES, tags=["Reservations"])
async def cancel_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service)
):
    """Cancel reservation"""
    canceled = await service.cancel_reservation(reservation_id)
    return _envelope(_reservation_to_response(canceled), "Reservation canceled successfully")

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _envelope(data, message: str) -> dict:
    return {"success": True, "message": message, "data": data}

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(id=room.id, name=room.name, capacity=room.capacity)

def _reservation_to_response(reservation) -> ReservationResponse:
    """Convert Reservation entity to ReservationResponse"""
    return ReservationResponse(
        id=reservation.id,
        room_id=reservation.room_id,
        room_name=reservation.room_name,
        date=reservation.date,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
        user_name=reservation.user_name,
        party_size=reservation.party_size,
        created_at=reservation.created_at
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
