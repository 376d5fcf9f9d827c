import json
from typing import Any, Dict, List, Optional

import pytest

from itinerary_planner.llm.client import SamplingOptions


class FakeOracle:
    """Scripted stand-in for the generation service; records every request."""

    def __init__(self, responses: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def request(self, prompt, schema=None, options=SamplingOptions(temperature=0.7)):
        self.calls.append({"prompt": prompt, "schema": schema, "options": options})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def make_oracle():
    return FakeOracle


@pytest.fixture
def itinerary_data() -> dict:
    return {
        "tripTitle": "3-Day Parisian Adventure",
        "totalEstimatedCost": "Approximately 950 EUR",
        "location": {"city": "Paris", "country": "France"},
        "days": [
            {
                "day": 1,
                "theme": "Art & History",
                "summary": "Museums on the Right Bank.",
                "activities": [
                    {
                        "time": "Evening",
                        "description": "Seine river cruise",
                        "estimated_cost": "€15",
                        "address": "Port de la Bourdonnais, 75007 Paris",
                    },
                    {
                        "time": "Morning",
                        "description": "Louvre Museum",
                        "estimated_cost": "€22",
                        "address": "Rue de Rivoli, 75001 Paris",
                        "details": "Book a timed entry.",
                    },
                    {
                        "time": "Afternoon",
                        "description": "Tuileries Garden stroll",
                        "estimated_cost": "Free",
                        "address": "Place de la Concorde, 75001 Paris",
                    },
                ],
                "dining": {
                    "lunch": {
                        "name": "Café Marly",
                        "description": "Terrace overlooking the pyramid.",
                        "address": "93 Rue de Rivoli, 75001 Paris",
                    },
                    "dinner": {
                        "name": "Le Train Bleu",
                        "description": "Belle Époque dining room.",
                        "address": "Place Louis-Armand, 75012 Paris",
                    },
                },
            },
            {
                "day": 2,
                "theme": "Montmartre",
                "summary": "Hilltop village walk.",
                "activities": [],
                "dining": {
                    "lunch": {"name": "La Maison Rose", "description": "Pink café.", "address": ""},
                    "dinner": {"name": "Le Consulat", "description": "Classic bistro.", "address": ""},
                },
            },
        ],
    }


@pytest.fixture
def itinerary_json(itinerary_data) -> str:
    return json.dumps(itinerary_data)


@pytest.fixture
def hotels_json() -> str:
    return json.dumps(
        [
            {
                "name": "Hôtel des Grands Boulevards",
                "description": "Boutique hotel near the Opéra.",
                "estimated_price": "€140 per night",
                "address": "17 Boulevard Poissonnière, 75002 Paris",
            },
            {
                "name": "Generator Paris",
                "description": "Design hostel with private rooms.",
                "estimated_price": "€90 per night",
                "address": "9-11 Place du Colonel Fabien, 75010 Paris",
            },
        ]
    )
