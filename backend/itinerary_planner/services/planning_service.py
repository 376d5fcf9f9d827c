import logging
from typing import List, Tuple
from uuid import uuid4

from itinerary_planner.llm.client import GenerationOracle
from itinerary_planner.llm.planner import ItineraryGenerator
from itinerary_planner.llm.tools.location_tool import LocationValidator
from itinerary_planner.models.domain import Itinerary, MapSource, RouteStop
from itinerary_planner.models.schemas import TripRequest
from itinerary_planner.routing.maps import MapLinkBuilder
from itinerary_planner.routing.sequencer import sequence_day
from itinerary_planner.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)

INVALID_LOCATION_MESSAGE = (
    "The location details provided seem to be incorrect. Please check the Country, "
    "State, City, and Pincode and try again."
)


class LocationRejected(ValueError):
    def __init__(self, message: str = INVALID_LOCATION_MESSAGE):
        super().__init__(message)
        self.message = message


class ItineraryNotFound(LookupError):
    pass


class PlanningService:
    def __init__(
        self,
        repository: InMemoryRepository,
        oracle: GenerationOracle,
        map_builder: MapLinkBuilder,
    ):
        self.repository = repository
        self.validator = LocationValidator(oracle)
        self.generator = ItineraryGenerator(oracle)
        self.map_builder = map_builder

    def plan_trip(self, request: TripRequest) -> Itinerary:
        if not self.validator.validate(
            request.country, request.state, request.city, request.postal_code
        ):
            raise LocationRejected()

        draft = self.generator.generate(
            country=request.country,
            state=request.state,
            city=request.city,
            postal_code=request.postal_code,
            budget=request.budget,
            currency=request.currency,
            days=str(request.days),
            interests=request.interests,
        )
        itinerary = draft.with_id(uuid4().hex)
        self.repository.add_itinerary(itinerary)
        logger.info("Stored itinerary %s", itinerary.id)
        return itinerary

    def get_itinerary(self, itinerary_id: str) -> Itinerary:
        itinerary = self.repository.get_itinerary(itinerary_id)
        if itinerary is None:
            raise ItineraryNotFound(itinerary_id)
        return itinerary

    def save_itinerary(self, itinerary_id: str) -> Itinerary:
        itinerary = self.get_itinerary(itinerary_id)
        if not self.repository.save(itinerary_id):
            logger.debug("Itinerary %s already saved", itinerary_id)
        return itinerary

    def list_saved(self) -> List[Itinerary]:
        return self.repository.list_saved()

    def route_for_day(self, itinerary_id: str, day: int) -> Tuple[List[RouteStop], MapSource]:
        itinerary = self.get_itinerary(itinerary_id)
        day_plan = itinerary.get_day(day)
        if day_plan is None:
            raise ItineraryNotFound(f"{itinerary_id} day {day}")
        stops = sequence_day(day_plan)
        return stops, self.map_builder.for_route(stops, itinerary.location)

