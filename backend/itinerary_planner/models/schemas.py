from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from itinerary_planner.models.domain import (
    Activity,
    DayPlan,
    DiningOption,
    Hotel,
    Itinerary,
    MapSource,
    RouteStop,
)


class TripRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    country: str
    state: str = ""
    city: str
    postal_code: str = ""
    budget: str
    currency: str = "USD"
    days: int = Field(3, ge=1, le=14)
    interests: str = ""


class HotelSearchRequest(BaseModel):
    min_price: int = Field(ge=0)
    max_price: int = Field(ge=0)


class ActivitySchema(BaseModel):
    time: str
    description: str
    estimated_cost: str
    address: str
    details: Optional[str] = None

    @classmethod
    def from_domain(cls, obj: Activity) -> "ActivitySchema":
        return cls(
            time=obj.time,
            description=obj.description,
            estimated_cost=obj.estimated_cost,
            address=obj.address,
            details=obj.details,
        )


class DiningOptionSchema(BaseModel):
    name: str
    description: str
    address: str

    @classmethod
    def from_domain(cls, obj: DiningOption) -> "DiningOptionSchema":
        return cls(name=obj.name, description=obj.description, address=obj.address)


class DiningSchema(BaseModel):
    lunch: DiningOptionSchema
    dinner: DiningOptionSchema


class DayPlanSchema(BaseModel):
    day: int
    theme: str
    summary: str
    activities: List[ActivitySchema]
    dining: DiningSchema

    @classmethod
    def from_domain(cls, obj: DayPlan) -> "DayPlanSchema":
        return cls(
            day=obj.day,
            theme=obj.theme,
            summary=obj.summary,
            activities=[ActivitySchema.from_domain(a) for a in obj.activities],
            dining=DiningSchema(
                lunch=DiningOptionSchema.from_domain(obj.dining.lunch),
                dinner=DiningOptionSchema.from_domain(obj.dining.dinner),
            ),
        )


class LocationSchema(BaseModel):
    city: str
    country: str


class ItinerarySchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    trip_title: str = Field(alias="tripTitle")
    total_estimated_cost: str = Field(alias="totalEstimatedCost")
    location: LocationSchema
    days: List[DayPlanSchema]

    @classmethod
    def from_domain(cls, obj: Itinerary) -> "ItinerarySchema":
        return cls(
            id=obj.id,
            trip_title=obj.trip_title,
            total_estimated_cost=obj.total_estimated_cost,
            location=LocationSchema(city=obj.location.city, country=obj.location.country),
            days=[DayPlanSchema.from_domain(d) for d in obj.days],
        )


class HotelSchema(BaseModel):
    id: str
    name: str
    description: str
    estimated_price: str
    address: str
    map_link: str

    @classmethod
    def from_domain(cls, obj: Hotel, map_link: str) -> "HotelSchema":
        return cls(
            id=obj.key,
            name=obj.name,
            description=obj.description,
            estimated_price=obj.estimated_price,
            address=obj.address,
            map_link=map_link,
        )


class HotelResponse(BaseModel):
    currency: str
    min_price: int
    max_price: int
    hotels: List[HotelSchema]


class PricePresetSchema(BaseModel):
    name: str
    label: str
    min_price: int
    max_price: int


class RouteStopSchema(BaseModel):
    label: str
    address: str
    kind: str
    map_link: str

    @classmethod
    def from_domain(cls, obj: RouteStop, map_link: str) -> "RouteStopSchema":
        return cls(label=obj.label, address=obj.address, kind=obj.kind, map_link=map_link)


class MapSourceSchema(BaseModel):
    mode: str
    url: str
    query: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    waypoints: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, obj: MapSource) -> "MapSourceSchema":
        return cls(
            mode=obj.mode,
            url=obj.url,
            query=obj.query,
            origin=obj.origin,
            destination=obj.destination,
            waypoints=list(obj.waypoints),
        )


class RouteResponse(BaseModel):
    itinerary_id: str
    day: int
    stops: List[RouteStopSchema]
    map: MapSourceSchema
