import logging

from itinerary_planner.llm.client import GenerationOracle, SamplingOptions
from itinerary_planner.llm.errors import GenerationError, GenerationFailed, MalformedResponse
from itinerary_planner.llm.prompts import itinerary_prompt, join_location
from itinerary_planner.llm.schemas import ITINERARY_SCHEMA, parse_itinerary
from itinerary_planner.models.domain import ItineraryDraft

logger = logging.getLogger(__name__)

CREATIVE = SamplingOptions(temperature=0.8, top_p=0.9)


class ItineraryGenerator:
    """
    Produces a multi-day plan from trip parameters with one schema-constrained
    request. Any failure, whether the call, the JSON or the structure, ends in
    a single ``GenerationError``; no partial itinerary is ever returned.
    """

    error_prefix = "Failed to generate itinerary."

    def __init__(self, oracle: GenerationOracle, options: SamplingOptions = CREATIVE):
        self.oracle = oracle
        self.options = options

    def build_prompt(
        self,
        country: str,
        state: str,
        city: str,
        postal_code: str,
        budget: str,
        currency: str,
        days: str,
        interests: str = "",
    ) -> str:
        location = join_location([city, postal_code, state, country])
        return itinerary_prompt(location, str(days), str(budget), currency, interests)

    def generate(
        self,
        country: str,
        state: str,
        city: str,
        postal_code: str,
        budget: str,
        currency: str,
        days: str,
        interests: str = "",
    ) -> ItineraryDraft:
        prompt = self.build_prompt(country, state, city, postal_code, budget, currency, days, interests)
        try:
            text = self.oracle.request(prompt, schema=ITINERARY_SCHEMA, options=self.options)
            draft = parse_itinerary(text)
        except MalformedResponse as exc:
            logger.error("Unusable itinerary response: %s\n%s", exc, exc.excerpt())
            raise MalformedResponse(f"{self.error_prefix} {exc.message}", raw=exc.raw) from exc
        except GenerationError as exc:
            logger.error("Itinerary generation failed: %s", exc)
            raise type(exc)(f"{self.error_prefix} {exc.message}") from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Itinerary generation failed: %s", exc)
            raise GenerationFailed(f"{self.error_prefix} {exc}") from exc

        logger.info(
            "Generated '%s' with %d day(s) for %s, %s",
            draft.trip_title,
            len(draft.days),
            draft.location.city,
            draft.location.country,
        )
        return draft
