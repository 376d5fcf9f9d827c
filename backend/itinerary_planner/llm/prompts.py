from typing import Iterable

LOCATION_CHECK_PROMPT = (
    'Given the following location details: Country: "{country}", State/Region: "{state}", '
    'City: "{city}", Area Pincode: "{postal_code}". Do these details correspond to a valid, '
    "real-world geographical location where the city, state, and pincode all belong to the "
    "specified country? Please consider that State/Region and Pincode are optional and might "
    'be empty strings. If the combination is valid, respond with only the word "true". '
    'If it is invalid or nonsensical, respond with only the word "false".'
)

ITINERARY_PROMPT = (
    "Create a detailed travel itinerary for a trip to {location} for {days} days "
    "with a budget of {budget} {currency}.\n"
    "The itinerary should be well-structured, creative, and practical. For every activity and "
    "dining location, you MUST provide a valid, real-world address suitable for use in a maps service."
)

INTERESTS_CLAUSE = "\nPlease tailor the itinerary to the user's preferences and interests: {interests}."

ITINERARY_STRUCTURE_CLAUSE = (
    "\nFor each day, provide a theme, a summary, a list of activities (morning, afternoon, evening) "
    "with estimated costs in {currency}, and specific recommendations for lunch and dinner that fit "
    "the budget.\nEnsure the total estimated cost aligns with the provided budget and is also in {currency}."
)

HOTEL_PROMPT = (
    "Suggest 5-7 hotels for a trip to {city}, {country} with a nightly price between "
    "{min_price} and {max_price} {currency}.\n"
    "For each hotel, provide its name, a brief description, an estimated price per night in "
    "{currency}, and its full real-world address for mapping."
)


def join_location(parts: Iterable[str]) -> str:
    return ", ".join(p.strip() for p in parts if p and p.strip())


def location_check_prompt(country: str, state: str, city: str, postal_code: str) -> str:
    return LOCATION_CHECK_PROMPT.format(
        country=country, state=state, city=city, postal_code=postal_code
    )


def itinerary_prompt(
    location: str, days: str, budget: str, currency: str, interests: str = ""
) -> str:
    prompt = ITINERARY_PROMPT.format(location=location, days=days, budget=budget, currency=currency)
    if interests and interests.strip():
        prompt += INTERESTS_CLAUSE.format(interests=interests.strip())
    prompt += ITINERARY_STRUCTURE_CLAUSE.format(currency=currency)
    return prompt


def hotel_prompt(
    city: str, country: str, currency: str, min_price: int, max_price: int
) -> str:
    return HOTEL_PROMPT.format(
        city=city, country=country, currency=currency, min_price=min_price, max_price=max_price
    )
