from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from itinerary_planner.llm.client import SamplingOptions
from itinerary_planner.llm.errors import GenerationFailed

logger = logging.getLogger(__name__)


@dataclass
class OllamaOracle:
    """
    Generation backend using Ollama's chat API.
    A schema is forwarded as ``format`` so the model is constrained to it.
    """

    host: str
    model: str
    timeout_s: int = 120

    def _build_messages(self, prompt: str) -> List[dict]:
        return [{"role": "user", "content": prompt}]

    def _build_payload(
        self, prompt: str, schema: Optional[Dict[str, Any]], options: SamplingOptions
    ) -> dict:
        sampling = {"temperature": options.temperature}
        if options.top_p is not None:
            sampling["top_p"] = options.top_p
        payload = {
            "model": self.model,
            "messages": self._build_messages(prompt),
            "stream": False,
            "options": sampling,
        }
        if schema is not None:
            payload["format"] = schema
        return payload

    def request(
        self,
        prompt: str,
        schema: Optional[Dict[str, Any]] = None,
        options: SamplingOptions = SamplingOptions(temperature=0.7),
    ) -> str:
        payload = self._build_payload(prompt, schema, options)
        try:
            resp = requests.post(
                f"{self.host.rstrip('/')}/api/chat", json=payload, timeout=self.timeout_s
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            logger.error("Ollama request failed: %s", exc)
            raise GenerationFailed(f"Ollama request failed: {exc}") from exc
        except ValueError as exc:
            logger.error("Ollama returned a non-JSON envelope: %s", exc)
            raise GenerationFailed(f"Ollama returned an unreadable reply: {exc}") from exc

        return data.get("message", {}).get("content", "")
