import logging

from itinerary_planner.core.config import Settings
from itinerary_planner.llm.backends.gemini_backend import GeminiOracle
from itinerary_planner.llm.backends.ollama_backend import OllamaOracle
from itinerary_planner.llm.client import GenerationOracle
from itinerary_planner.llm.errors import ConfigurationError

logger = logging.getLogger(__name__)


def build_oracle(settings: Settings) -> GenerationOracle:
    provider = settings.llm_provider.lower()
    if provider == "gemini":
        if not settings.api_key:
            raise ConfigurationError(
                "API_KEY environment variable not set. "
                "Set API_KEY (or GEMINI_API_KEY) before starting the service."
            )
        logger.info("Using Gemini model %s", settings.gemini_model)
        return GeminiOracle(
            api_key=settings.api_key,
            model=settings.gemini_model,
            timeout_s=settings.request_timeout_s,
        )
    if provider == "ollama":
        logger.info("Using Ollama model %s at %s", settings.ollama_model, settings.ollama_host)
        return OllamaOracle(
            host=settings.ollama_host,
            model=settings.ollama_model,
            timeout_s=settings.request_timeout_s,
        )
    raise ConfigurationError(f"Unknown LLM_PROVIDER '{settings.llm_provider}'")
