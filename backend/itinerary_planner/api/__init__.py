from fastapi import HTTPException
from starlette.requests import Request

from itinerary_planner.routing.maps import MapLinkBuilder
from itinerary_planner.services.hotel_service import HotelService
from itinerary_planner.services.planning_service import PlanningService


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(status_code=500, detail=f"{name} not initialized")
    return value


def get_planning_service(request: Request) -> PlanningService:
    return _state(request, "planning_service")


def get_hotel_service(request: Request) -> HotelService:
    return _state(request, "hotel_service")


def get_map_builder(request: Request) -> MapLinkBuilder:
    return _state(request, "map_builder")
