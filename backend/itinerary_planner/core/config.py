from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True, extra="ignore")

    app_name: str = Field("Trip Itinerary Planner", validation_alias="APP_NAME")
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    llm_provider: str = Field("gemini", validation_alias="LLM_PROVIDER")
    api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY")
    )
    gemini_model: str = Field("gemini-2.5-flash", validation_alias="GEMINI_MODEL")
    ollama_host: str = Field("http://localhost:11434", validation_alias="OLLAMA_HOST")
    ollama_model: str = Field("llama3", validation_alias="OLLAMA_MODEL")
    request_timeout_s: int = Field(120, validation_alias="LLM_TIMEOUT_S")
    maps_base_url: str = Field("https://www.google.com/maps", validation_alias="MAPS_BASE_URL")
    max_drafts: int = Field(100, validation_alias="MAX_DRAFTS")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()
