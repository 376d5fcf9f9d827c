import logging

from itinerary_planner.llm.client import GenerationOracle, SamplingOptions
from itinerary_planner.llm.errors import ValidationUnavailable
from itinerary_planner.llm.prompts import location_check_prompt

logger = logging.getLogger(__name__)

DETERMINISTIC = SamplingOptions(temperature=0.0)


class LocationValidator:
    """
    Cheap plausibility gate run before an itinerary is requested.

    It fails open: with too little input to judge, or when the generation
    service cannot be reached, the location is accepted and the itinerary
    generator gets to report the real problem.
    """

    min_fields = 2

    def __init__(self, oracle: GenerationOracle):
        self.oracle = oracle

    def validate(self, country: str, state: str, city: str, postal_code: str) -> bool:
        filled = [v for v in (city, postal_code, state, country) if v and v.strip()]
        if len(filled) < self.min_fields:
            return True

        try:
            answer = self._ask(country, state, city, postal_code)
        except ValidationUnavailable as exc:
            logger.warning("Location check unavailable, accepting input: %s", exc)
            return True

        is_valid = answer.strip().lower() == "true"
        if not is_valid:
            logger.info("Location rejected: %s", ", ".join(filled))
        return is_valid

    def _ask(self, country: str, state: str, city: str, postal_code: str) -> str:
        prompt = location_check_prompt(country, state, city, postal_code)
        try:
            return self.oracle.request(prompt, options=DETERMINISTIC) or ""
        except Exception as exc:  # noqa: BLE001
            raise ValidationUnavailable(str(exc)) from exc
