"""
Structured-output contracts for the generation service.

Each schema below is sent with its request so the service returns matching
JSON. The service is not trusted to have honoured it: every response is
parsed again and validated against the pydantic payload models further
down before it becomes a domain object.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from itinerary_planner.llm.errors import MalformedResponse
from itinerary_planner.models.domain import (
    Activity,
    DayPlan,
    Dining,
    DiningOption,
    Hotel,
    ItineraryDraft,
    Location,
)

_ADDRESS_HINT = "The full, real-world address of the {what} for mapping purposes."

ACTIVITY_SCHEMA = {
    "type": "object",
    "properties": {
        "time": {"type": "string", "description": "Time of day (e.g., Morning, Afternoon, Evening)."},
        "description": {"type": "string", "description": "A concise description of the activity."},
        "estimated_cost": {
            "type": "string",
            "description": "Estimated cost for this activity in the specified currency. e.g., '€20' or 'Free'",
        },
        "details": {"type": "string", "description": "Optional: A brief detail, like a booking tip."},
        "address": {"type": "string", "description": _ADDRESS_HINT.format(what="activity location")},
    },
    "required": ["time", "description", "estimated_cost", "address"],
}


def _dining_option_schema(meal: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string", "description": f"Name of the restaurant or cafe for {meal}."},
            "description": {"type": "string", "description": f"A brief description of the {meal} spot."},
            "address": {"type": "string", "description": _ADDRESS_HINT.format(what="restaurant")},
        },
        "required": ["name", "description", "address"],
    }


DAY_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "day": {"type": "integer", "description": "The day number (e.g., 1, 2, 3)."},
        "theme": {"type": "string", "description": "A short, engaging theme for the day."},
        "summary": {"type": "string", "description": "A brief one-sentence summary of the day's activities."},
        "activities": {
            "type": "array",
            "description": "A list of activities for the day.",
            "items": ACTIVITY_SCHEMA,
        },
        "dining": {
            "type": "object",
            "description": "Dining recommendations for the day.",
            "properties": {
                "lunch": _dining_option_schema("lunch"),
                "dinner": _dining_option_schema("dinner"),
            },
            "required": ["lunch", "dinner"],
        },
    },
    "required": ["day", "theme", "summary", "activities", "dining"],
}

ITINERARY_SCHEMA = {
    "type": "object",
    "properties": {
        "tripTitle": {
            "type": "string",
            "description": "A creative and catchy title for the trip. e.g. '3-Day Parisian Adventure'",
        },
        "totalEstimatedCost": {
            "type": "string",
            "description": (
                "A string summarizing the total estimated cost for the trip, factoring in the "
                "user's budget and specified currency. e.g. 'Approximately 950 EUR'"
            ),
        },
        "location": {
            "type": "object",
            "description": "The primary location of the trip.",
            "properties": {
                "city": {"type": "string", "description": "The main city of the trip."},
                "country": {"type": "string", "description": "The country of the trip."},
            },
            "required": ["city", "country"],
        },
        "days": {"type": "array", "description": "An array of daily plans.", "items": DAY_PLAN_SCHEMA},
    },
    "required": ["tripTitle", "totalEstimatedCost", "days", "location"],
}

HOTEL_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "The name of the hotel."},
        "description": {
            "type": "string",
            "description": "A brief, one or two sentence description of the hotel and why it suits its category.",
        },
        "estimated_price": {
            "type": "string",
            "description": "The estimated price per night in the specified currency. e.g. '€150 - €200'",
        },
        "address": {"type": "string", "description": _ADDRESS_HINT.format(what="hotel")},
    },
    "required": ["name", "description", "estimated_price", "address"],
}

HOTEL_LIST_SCHEMA = {
    "type": "array",
    "description": "A list of hotel recommendations.",
    "items": HOTEL_SCHEMA,
}


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ActivityPayload(_Payload):
    time: str
    description: str
    estimated_cost: str
    address: str = ""
    details: Optional[str] = None

    @field_validator("address", mode="before")
    @classmethod
    def blank_address(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_domain(self) -> Activity:
        return Activity(
            time=self.time,
            description=self.description,
            estimated_cost=self.estimated_cost,
            address=self.address.strip(),
            details=self.details,
        )


class DiningOptionPayload(_Payload):
    name: str
    description: str
    address: str = ""

    @field_validator("address", mode="before")
    @classmethod
    def blank_address(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_domain(self) -> DiningOption:
        return DiningOption(name=self.name, description=self.description, address=self.address.strip())


class DiningPayload(_Payload):
    lunch: DiningOptionPayload
    dinner: DiningOptionPayload


class DayPlanPayload(_Payload):
    day: int = Field(ge=1)
    theme: str
    summary: str
    activities: List[ActivityPayload]
    dining: DiningPayload

    def to_domain(self) -> DayPlan:
        return DayPlan(
            day=self.day,
            theme=self.theme,
            summary=self.summary,
            activities=[a.to_domain() for a in self.activities],
            dining=Dining(lunch=self.dining.lunch.to_domain(), dinner=self.dining.dinner.to_domain()),
        )


class LocationPayload(_Payload):
    city: str
    country: str


class ItineraryPayload(_Payload):
    trip_title: str = Field(alias="tripTitle")
    total_estimated_cost: str = Field(alias="totalEstimatedCost")
    location: LocationPayload
    days: List[DayPlanPayload] = Field(min_length=1)

    def to_domain(self) -> ItineraryDraft:
        return ItineraryDraft(
            trip_title=self.trip_title,
            total_estimated_cost=self.total_estimated_cost,
            location=Location(city=self.location.city, country=self.location.country),
            days=[d.to_domain() for d in self.days],
        )


class HotelPayload(_Payload):
    name: str
    description: str
    estimated_price: str
    address: str

    def to_domain(self) -> Hotel:
        return Hotel(
            name=self.name,
            description=self.description,
            estimated_price=self.estimated_price,
            address=self.address.strip(),
        )


_HOTEL_LIST = TypeAdapter(List[HotelPayload])

T = TypeVar("T", bound=BaseModel)


def _strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def load_json(text: Optional[str]) -> Any:
    cleaned = _strip_code_fences(text or "")
    if not cleaned:
        raise MalformedResponse("The response was empty.", raw=text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(
            f"The response was not valid JSON (line {exc.lineno}, column {exc.colno}).", raw=text
        ) from exc


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{where}: {first['msg']} ({exc.error_count()} problem(s))"


def parse_model(text: Optional[str], model: Type[T]) -> T:
    data = load_json(text)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(
            f"The response did not match the expected structure: {_describe(exc)}", raw=text
        ) from exc


def parse_itinerary(text: Optional[str]) -> ItineraryDraft:
    return parse_model(text, ItineraryPayload).to_domain()


def parse_hotels(text: Optional[str]) -> List[Hotel]:
    data = load_json(text)
    try:
        payloads = _HOTEL_LIST.validate_python(data)
    except ValidationError as exc:
        raise MalformedResponse(
            f"The response did not match the expected structure: {_describe(exc)}", raw=text
        ) from exc
    return [h.to_domain() for h in payloads]
