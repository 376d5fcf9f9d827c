from typing import Optional


class ConfigurationError(RuntimeError):
    """Raised at startup when the generation service cannot be configured."""


class GenerationError(Exception):
    """Base error for any failed generation; ``str(exc)`` is shown to users."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GenerationFailed(GenerationError):
    """The generation service call itself failed (network, auth, quota, ...)."""


class MalformedResponse(GenerationError):
    def __init__(self, message: str, *, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw

    def excerpt(self, max_chars: int = 500) -> str:
        text = (self.raw or "").strip()
        if len(text) <= max_chars:
            return text
        return f"{text[: max_chars // 2]}\n...\n{text[-max_chars // 2 :]}"


class ValidationUnavailable(Exception):
    """Location plausibility could not be checked; never leaves the validator."""
