import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from itinerary_planner.llm.client import SamplingOptions
from itinerary_planner.llm.errors import GenerationFailed

logger = logging.getLogger(__name__)


def to_gemini_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Gemini spells node types in upper case (OBJECT, STRING, ...)."""
    converted: Dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties":
            converted[key] = {name: to_gemini_schema(node) for name, node in value.items()}
        elif key == "items":
            converted[key] = to_gemini_schema(value)
        else:
            converted[key] = value
    return converted


class GeminiOracle:
    """Each oracle owns its client, so oracles with different keys can coexist."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", timeout_s: int = 120):
        self.model_name = model
        self.timeout_s = timeout_s
        # HttpOptions.timeout is in milliseconds.
        self._client = genai.Client(
            api_key=api_key, http_options=types.HttpOptions(timeout=timeout_s * 1000)
        )

    def _generation_config(
        self, schema: Optional[Dict[str, Any]], options: SamplingOptions
    ) -> Dict[str, Any]:
        config: Dict[str, Any] = {"temperature": options.temperature}
        if options.top_p is not None:
            config["top_p"] = options.top_p
        if schema is not None:
            config["response_mime_type"] = "application/json"
            config["response_schema"] = to_gemini_schema(schema)
        return config

    def request(
        self,
        prompt: str,
        schema: Optional[Dict[str, Any]] = None,
        options: SamplingOptions = SamplingOptions(temperature=0.7),
    ) -> str:
        try:
            resp = self._client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(**self._generation_config(schema, options)),
            )
            return resp.text or ""
        except Exception as exc:  # noqa: BLE001
            logger.error("Gemini request failed: %s", exc)
            raise GenerationFailed(f"Gemini API error: {exc}") from exc
