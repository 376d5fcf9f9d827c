from typing import List

from fastapi import APIRouter, Depends, HTTPException

from itinerary_planner.api import get_hotel_service, get_map_builder, get_planning_service
from itinerary_planner.llm.errors import GenerationError
from itinerary_planner.llm.tools.hotel_tool import PRICE_PRESETS
from itinerary_planner.models.schemas import (
    HotelResponse,
    HotelSchema,
    HotelSearchRequest,
    PricePresetSchema,
)
from itinerary_planner.routing.maps import MapLinkBuilder
from itinerary_planner.services.hotel_service import HotelService
from itinerary_planner.services.planning_service import ItineraryNotFound, PlanningService

router = APIRouter()


@router.get("/hotels/presets", response_model=List[PricePresetSchema])
def list_price_presets() -> List[PricePresetSchema]:
    return [
        PricePresetSchema(name=p.name, label=p.label, min_price=p.min_price, max_price=p.max_price)
        for p in PRICE_PRESETS
    ]


@router.post("/itineraries/{itinerary_id}/hotels", response_model=HotelResponse)
def find_hotels(
    itinerary_id: str,
    search: HotelSearchRequest,
    planning: PlanningService = Depends(get_planning_service),
    hotels: HotelService = Depends(get_hotel_service),
    map_builder: MapLinkBuilder = Depends(get_map_builder),
) -> HotelResponse:
    try:
        itinerary = planning.get_itinerary(itinerary_id)
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail="Itinerary not found") from exc

    try:
        currency, found = hotels.find_hotels(itinerary, search.min_price, search.max_price)
    except GenerationError as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc

    return HotelResponse(
        currency=currency,
        min_price=search.min_price,
        max_price=search.max_price,
        hotels=[HotelSchema.from_domain(h, map_builder.search_link(h.address)) for h in found],
    )
