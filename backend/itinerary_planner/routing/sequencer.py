from typing import Dict, List, Optional

from itinerary_planner.models.domain import Activity, DayPlan, DiningOption, RouteStop

TIME_SLOTS = ("morning", "afternoon", "evening")


def _has_address(address: Optional[str]) -> bool:
    return bool(address and address.strip())


def _activity_stop(activity: Activity) -> RouteStop:
    return RouteStop(label=activity.description, address=activity.address, kind="activity")


def _dining_stop(option: DiningOption, kind: str) -> List[RouteStop]:
    if not _has_address(option.address):
        return []
    return [RouteStop(label=option.name, address=option.address, kind=kind)]


def sequence_day(day: DayPlan) -> List[RouteStop]:
    """
    Order one day's stops: morning, lunch, afternoon, dinner, evening.

    Only stops with an address are kept. Activities whose time label is not
    morning/afternoon/evening (case-insensitive) are left out.
    """
    buckets: Dict[str, List[RouteStop]] = {slot: [] for slot in TIME_SLOTS}
    for activity in day.activities:
        if not _has_address(activity.address):
            continue
        slot = (activity.time or "").lower()
        if slot in buckets:
            buckets[slot].append(_activity_stop(activity))

    return (
        buckets["morning"]
        + _dining_stop(day.dining.lunch, "lunch")
        + buckets["afternoon"]
        + _dining_stop(day.dining.dinner, "dinner")
        + buckets["evening"]
    )
