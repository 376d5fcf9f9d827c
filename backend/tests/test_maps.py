from itinerary_planner.models.domain import Location, RouteStop
from itinerary_planner.routing.maps import MapLinkBuilder

PARIS = Location(city="Paris", country="France")


def _stops(*addresses):
    return [RouteStop(label=a, address=a, kind="activity") for a in addresses]


def test_no_stops_centres_on_city():
    source = MapLinkBuilder("k3y").for_route([], PARIS)

    assert source.mode == "place"
    assert source.query == "Paris,France"
    assert source.url == "https://www.google.com/maps/embed/v1/place?key=k3y&q=Paris%2CFrance"


def test_single_stop_is_a_place():
    source = MapLinkBuilder("k3y").for_route(_stops("1 Rue de Rivoli"), PARIS)

    assert source.mode == "place"
    assert source.query == "1 Rue de Rivoli"
    assert source.url.endswith("&q=1%20Rue%20de%20Rivoli")


def test_two_stops_are_directions_without_waypoints():
    source = MapLinkBuilder("k3y").for_route(_stops("A", "B"), PARIS)

    assert source.mode == "directions"
    assert (source.origin, source.destination, source.waypoints) == ("A", "B", [])
    assert "waypoints" not in source.url


def test_interior_stops_become_ordered_waypoints():
    source = MapLinkBuilder("k3y").for_route(_stops("A", "B", "C", "D"), PARIS)

    assert source.origin == "A"
    assert source.destination == "D"
    assert source.waypoints == ["B", "C"]
    assert source.url == (
        "https://www.google.com/maps/embed/v1/directions?key=k3y"
        "&origin=A&destination=D&waypoints=B%7CC"
    )


def test_search_link_encodes_address():
    link = MapLinkBuilder(None, base_url="https://maps.example.com/").search_link("5 Av. Anatole & Co")
    assert link == "https://maps.example.com/search/?api=1&query=5%20Av.%20Anatole%20%26%20Co"
