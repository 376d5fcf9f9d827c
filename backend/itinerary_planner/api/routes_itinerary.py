from typing import List

from fastapi import APIRouter, Depends, HTTPException

from itinerary_planner.api import get_map_builder, get_planning_service
from itinerary_planner.llm.errors import GenerationError
from itinerary_planner.models.schemas import (
    ItinerarySchema,
    MapSourceSchema,
    RouteResponse,
    RouteStopSchema,
    TripRequest,
)
from itinerary_planner.routing.maps import MapLinkBuilder
from itinerary_planner.services.planning_service import (
    ItineraryNotFound,
    LocationRejected,
    PlanningService,
)

router = APIRouter()


@router.post("/", response_model=ItinerarySchema)
def create_itinerary(
    trip: TripRequest,
    service: PlanningService = Depends(get_planning_service),
) -> ItinerarySchema:
    try:
        itinerary = service.plan_trip(trip)
    except LocationRejected as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return ItinerarySchema.from_domain(itinerary)


@router.get("/", response_model=List[ItinerarySchema])
def list_saved_itineraries(
    service: PlanningService = Depends(get_planning_service),
) -> List[ItinerarySchema]:
    return [ItinerarySchema.from_domain(i) for i in service.list_saved()]


@router.get("/{itinerary_id}", response_model=ItinerarySchema)
def get_itinerary(
    itinerary_id: str,
    service: PlanningService = Depends(get_planning_service),
) -> ItinerarySchema:
    try:
        return ItinerarySchema.from_domain(service.get_itinerary(itinerary_id))
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail="Itinerary not found") from exc


@router.post("/{itinerary_id}/save", response_model=ItinerarySchema)
def save_itinerary(
    itinerary_id: str,
    service: PlanningService = Depends(get_planning_service),
) -> ItinerarySchema:
    try:
        return ItinerarySchema.from_domain(service.save_itinerary(itinerary_id))
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail="Itinerary not found") from exc


@router.get("/{itinerary_id}/days/{day}/route", response_model=RouteResponse)
def get_day_route(
    itinerary_id: str,
    day: int,
    service: PlanningService = Depends(get_planning_service),
    map_builder: MapLinkBuilder = Depends(get_map_builder),
) -> RouteResponse:
    try:
        stops, map_source = service.route_for_day(itinerary_id, day)
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail="Itinerary or day not found") from exc
    return RouteResponse(
        itinerary_id=itinerary_id,
        day=day,
        stops=[RouteStopSchema.from_domain(s, map_builder.search_link(s.address)) for s in stops],
        map=MapSourceSchema.from_domain(map_source),
    )
