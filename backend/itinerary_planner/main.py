from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itinerary_planner import __version__
from itinerary_planner.api import routes_health, routes_hotels, routes_itinerary
from itinerary_planner.core.config import Settings, get_settings
from itinerary_planner.core.logging import configure_logging
from itinerary_planner.llm.client import GenerationOracle
from itinerary_planner.llm.factory import build_oracle
from itinerary_planner.routing.maps import MapLinkBuilder
from itinerary_planner.services.hotel_service import HotelService
from itinerary_planner.services.planning_service import PlanningService
from itinerary_planner.storage.repository import InMemoryRepository


def create_app(
    settings: Optional[Settings] = None, oracle: Optional[GenerationOracle] = None
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    # No credential means no service: build_oracle raises ConfigurationError.
    oracle = oracle or build_oracle(settings)

    app = FastAPI(title=settings.app_name, version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = InMemoryRepository(max_drafts=settings.max_drafts)
    map_builder = MapLinkBuilder(api_key=settings.api_key, base_url=settings.maps_base_url)

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_itinerary.router, prefix="/itineraries", tags=["itineraries"])
    app.include_router(routes_hotels.router, tags=["hotels"])

    app.state.settings = settings
    app.state.repository = repository
    app.state.map_builder = map_builder
    app.state.planning_service = PlanningService(
        repository=repository, oracle=oracle, map_builder=map_builder
    )
    app.state.hotel_service = HotelService(oracle=oracle)
    return app
