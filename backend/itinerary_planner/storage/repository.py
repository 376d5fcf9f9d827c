from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Dict, List, Optional

from itinerary_planner.models.domain import Itinerary


class InMemoryRepository:
    """
    Generated itineraries keyed by id, plus the ordered "saved" collection.
    Saved itineraries are kept for the life of the process. Unsaved drafts
    are capped at ``max_drafts``; the oldest draft is dropped first.
    """

    def __init__(self, max_drafts: int = 100) -> None:
        self.max_drafts = max_drafts
        self.itineraries: Dict[str, Itinerary] = {}
        self.drafts: "OrderedDict[str, None]" = OrderedDict()
        self.saved_ids: List[str] = []
        self._lock = threading.Lock()

    def add_itinerary(self, itinerary: Itinerary) -> Itinerary:
        with self._lock:
            self.itineraries[itinerary.id] = itinerary
            self.drafts[itinerary.id] = None
            while len(self.drafts) > self.max_drafts:
                stale_id, _ = self.drafts.popitem(last=False)
                del self.itineraries[stale_id]
        return itinerary

    def get_itinerary(self, itinerary_id: str) -> Optional[Itinerary]:
        return self.itineraries.get(itinerary_id)

    def save(self, itinerary_id: str) -> bool:
        """Mark an itinerary saved. Returns False if it was already saved."""
        with self._lock:
            if itinerary_id in self.saved_ids:
                return False
            self.drafts.pop(itinerary_id, None)
            self.saved_ids.append(itinerary_id)
            return True

    def list_saved(self) -> List[Itinerary]:
        return [self.itineraries[i] for i in self.saved_ids if i in self.itineraries]
