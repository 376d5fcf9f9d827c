import logging
import re
from dataclasses import dataclass
from typing import List

from itinerary_planner.llm.client import GenerationOracle, SamplingOptions
from itinerary_planner.llm.errors import GenerationError, GenerationFailed, MalformedResponse
from itinerary_planner.llm.prompts import hotel_prompt
from itinerary_planner.llm.schemas import HOTEL_LIST_SCHEMA, parse_hotels
from itinerary_planner.models.domain import Hotel

logger = logging.getLogger(__name__)

FACTUAL = SamplingOptions(temperature=0.7)
DEFAULT_CURRENCY = "USD"

_CURRENCY_CODE = re.compile(r"\b[A-Z]{3}\b")
_CURRENCY_RUN = re.compile(r"[A-Z]{2,}")


@dataclass(frozen=True)
class PricePreset:
    name: str
    label: str
    min_price: int
    max_price: int


PRICE_PRESETS: List[PricePreset] = [
    PricePreset("budget", "Budget", 50, 150),
    PricePreset("mid_range", "Mid-Range", 150, 300),
    PricePreset("luxury", "Luxury", 300, 1000),
]


def extract_currency(cost: str) -> str:
    """
    Pull a currency code out of a display cost string such as
    "Approximately 950 EUR". A standalone three-letter code wins over other
    capitalised words; falls back to USD when there is none.
    """
    match = _CURRENCY_CODE.search(cost or "") or _CURRENCY_RUN.search(cost or "")
    return match.group(0) if match else DEFAULT_CURRENCY


class HotelSuggester:
    """
    Asks the generation service for lodging in a nightly price band. The band
    is passed through as given; results are not filtered locally.
    An empty list is a valid answer, distinct from a raised ``GenerationError``.
    """

    error_prefix = "Failed to generate hotel suggestions."

    def __init__(self, oracle: GenerationOracle, options: SamplingOptions = FACTUAL):
        self.oracle = oracle
        self.options = options

    def suggest_hotels(
        self, city: str, country: str, currency: str, min_price: int, max_price: int
    ) -> List[Hotel]:
        prompt = hotel_prompt(city, country, currency, min_price, max_price)
        try:
            text = self.oracle.request(prompt, schema=HOTEL_LIST_SCHEMA, options=self.options)
            hotels = parse_hotels(text)
        except MalformedResponse as exc:
            logger.error("Unusable hotel response: %s\n%s", exc, exc.excerpt())
            raise MalformedResponse(f"{self.error_prefix} {exc.message}", raw=exc.raw) from exc
        except GenerationError as exc:
            logger.error("Hotel suggestion failed: %s", exc)
            raise type(exc)(f"{self.error_prefix} {exc.message}") from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Hotel suggestion failed: %s", exc)
            raise GenerationFailed(f"{self.error_prefix} {exc}") from exc

        logger.info(
            "Got %d hotel(s) in %s for %s-%s %s", len(hotels), city, min_price, max_price, currency
        )
        return hotels
