"""Client singletons for external API interactions."""
from src.clients.google_places_client import GooglePlacesClient
from src.clients.nominatim_client import NominatimClient
from src.clients.overpass_client import OverpassClient

__all__ = ["GooglePlacesClient", "NominatimClient", "OverpassClient"]
