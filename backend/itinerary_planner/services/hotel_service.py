import logging
from typing import List, Tuple

from itinerary_planner.llm.client import GenerationOracle
from itinerary_planner.llm.tools.hotel_tool import HotelSuggester, extract_currency
from itinerary_planner.models.domain import Hotel, Itinerary

logger = logging.getLogger(__name__)


class HotelService:
    def __init__(self, oracle: GenerationOracle):
        self.suggester = HotelSuggester(oracle)

    def find_hotels(
        self, itinerary: Itinerary, min_price: int, max_price: int
    ) -> Tuple[str, List[Hotel]]:
        """Returns the currency the band was quoted in along with the hotels."""
        currency = extract_currency(itinerary.total_estimated_cost)
        logger.debug("Searching hotels for %s in %s", itinerary.id, currency)
        hotels = self.suggester.suggest_hotels(
            city=itinerary.location.city,
            country=itinerary.location.country,
            currency=currency,
            min_price=min_price,
            max_price=max_price,
        )
        return currency, hotels
