from typing import List, Optional
from urllib.parse import quote

from itinerary_planner.models.domain import Location, MapSource, RouteStop


class MapLinkBuilder:
    """Builds embed and search URLs for the maps service from sequenced stops."""

    def __init__(self, api_key: Optional[str], base_url: str = "https://www.google.com/maps"):
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def _encode(value: str) -> str:
        return quote(value, safe="")

    def place(self, query: str) -> MapSource:
        url = f"{self.base_url}/embed/v1/place?key={self._encode(self.api_key)}&q={self._encode(query)}"
        return MapSource(mode="place", url=url, query=query)

    def directions(self, origin: str, destination: str, waypoints: List[str]) -> MapSource:
        url = (
            f"{self.base_url}/embed/v1/directions?key={self._encode(self.api_key)}"
            f"&origin={self._encode(origin)}&destination={self._encode(destination)}"
        )
        if waypoints:
            url += f"&waypoints={self._encode('|'.join(waypoints))}"
        return MapSource(
            mode="directions",
            url=url,
            origin=origin,
            destination=destination,
            waypoints=list(waypoints),
        )

    def search_link(self, address: str) -> str:
        return f"{self.base_url}/search/?api=1&query={self._encode(address)}"

    def for_route(self, stops: List[RouteStop], fallback: Location) -> MapSource:
        addresses = [s.address for s in stops if s.address]
        if not addresses:
            return self.place(f"{fallback.city},{fallback.country}")
        if len(addresses) == 1:
            return self.place(addresses[0])
        return self.directions(addresses[0], addresses[-1], addresses[1:-1])
