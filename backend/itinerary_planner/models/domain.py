import hashlib
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Location:
    city: str
    country: str


@dataclass(frozen=True)
class Activity:
    time: str
    description: str
    estimated_cost: str
    address: str = ""
    details: Optional[str] = None


@dataclass(frozen=True)
class DiningOption:
    name: str
    description: str
    address: str = ""


@dataclass(frozen=True)
class Dining:
    lunch: DiningOption
    dinner: DiningOption


@dataclass(frozen=True)
class DayPlan:
    day: int
    theme: str
    summary: str
    dining: Dining
    activities: List[Activity] = field(default_factory=list)


@dataclass(frozen=True)
class ItineraryDraft:
    """A generated itinerary before the caller has given it an identity."""

    trip_title: str
    total_estimated_cost: str
    location: Location
    days: List[DayPlan]

    def with_id(self, itinerary_id: str) -> "Itinerary":
        return Itinerary(
            id=itinerary_id,
            trip_title=self.trip_title,
            total_estimated_cost=self.total_estimated_cost,
            location=self.location,
            days=self.days,
        )


@dataclass(frozen=True)
class Itinerary:
    id: str
    trip_title: str
    total_estimated_cost: str
    location: Location
    days: List[DayPlan]

    def get_day(self, day: int) -> Optional[DayPlan]:
        for plan in self.days:
            if plan.day == day:
                return plan
        return None


@dataclass(frozen=True)
class Hotel:
    name: str
    description: str
    estimated_price: str
    address: str

    @property
    def key(self) -> str:
        """Synthetic identity for display dedup; two hotels sharing a name stay distinct."""
        digest = hashlib.sha1(f"{self.name}|{self.address}".encode("utf-8"))
        return digest.hexdigest()[:12]


@dataclass(frozen=True)
class RouteStop:
    label: str
    address: str
    kind: str  # "activity" | "lunch" | "dinner"


@dataclass(frozen=True)
class MapSource:
    mode: str  # "place" | "directions"
    url: str
    query: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    waypoints: List[str] = field(default_factory=list)
