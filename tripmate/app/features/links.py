"""Map links for itinerary items (Google Maps URL scheme, no API calls)."""

from urllib.parse import quote, urlencode

from tripmate.app.config import get_settings
from tripmate.app.models.common import Category
from tripmate.app.models.itinerary import ItineraryItem


def maps_url(item: ItineraryItem, base_url: str | None = None) -> str | None:
    """Build a maps link for an item.

    Transport legs link to transit directions towards the item's location;
    everything else links to a search for the location. Items without a
    location get no link.
    """
    if item.location is None:
        return None

    base = (base_url or get_settings().maps_base_url).rstrip("/")
    if item.category == Category.TRANSPORT:
        query = urlencode(
            {"api": 1, "destination": item.location.name, "travelmode": "transit"},
            quote_via=quote,
        )
        return f"{base}/dir/?{query}"

    query = urlencode({"api": 1, "query": item.location.name}, quote_via=quote)
    return f"{base}/search/?{query}"
