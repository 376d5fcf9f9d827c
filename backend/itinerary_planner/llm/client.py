from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True)
class SamplingOptions:
    temperature: float
    top_p: Optional[float] = None


class GenerationOracle(Protocol):
    """
    The one seam to the text generation service. Implementations return the
    raw response text and raise ``GenerationFailed`` when the call fails.
    When ``schema`` is given the service is asked for JSON matching it, but
    callers still parse and validate the text themselves.
    """

    def request(
        self,
        prompt: str,
        schema: Optional[Dict[str, Any]] = None,
        options: SamplingOptions = SamplingOptions(temperature=0.7),
    ) -> str:
        ...
