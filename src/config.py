# src/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# API Keys
GOOGLE_PLACES_API_KEY = os.getenv("GOOGLE_PLACES_API_KEY")

# Runtime parameters
GOOGLE_RATE_LIMIT = int(os.getenv("GOOGLE_RATE_LIMIT", "10"))  # requests per second
NOMINATIM_RATE_LIMIT = 1  # Nominatim usage policy: 1 request per second
GOOGLE_MAX_PAGES = 3  # Text Search caps out at 60 results (3 pages of 20)
GOOGLE_SEARCH_RADIUS_M = 50000  # API max for a location bias circle
SEARCH_QUERY = "skateboard shop"
GEOCODE_MISSING = os.getenv("GEOCODE_MISSING", "true").lower() in ("1", "true", "yes")
ENRICH_MISSING_ADDRESS = os.getenv("ENRICH_MISSING_ADDRESS", "false").lower() in ("1", "true", "yes")
OSM_ENABLED = os.getenv("OSM_ENABLED", "false").lower() in ("1", "true", "yes")
DUPLICATE_NAME_THRESHOLD = 90
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
OUTPUT_VERSION = "1.0"
HTTP_TIMEOUT_S = 60
USER_AGENT = "FindSkateshops/1.0 (skateshop directory builder)"

# Region (continental USA)
REGION_BOUNDS = {
    "min_lat": 24.5,
    "max_lat": 49.5,
    "min_lng": -125.0,
    "max_lng": -66.5,
}

# URLs
GOOGLE_TEXT_SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
NOMINATIM_URL = "https://nominatim.openstreetmap.org"
OVERPASS_ENDPOINTS = [
    "https://overpass-api.de/api/interpreter",
    "https://overpass.kumi.systems/api/interpreter",
]

# File names
DATA_DIR = os.getenv("DATA_DIR", "data")
OUTPUT_PATH = os.getenv("OUTPUT_PATH", "shops.json")
RAW_GOOGLE_PLACES_PATH = os.path.join(DATA_DIR, "google-places-raw.json")
MANUAL_ADDITIONS_PATH = os.path.join(DATA_DIR, "manual-additions.json")
CHAIN_STORES_PATH = os.path.join(DATA_DIR, "chain-stores.json")
PENDING_REVIEW_PATH = os.path.join(DATA_DIR, "pending-review.json")
APPROVED_PATH = os.path.join(DATA_DIR, "approved-shops.json")
REMOVED_PATH = os.path.join(DATA_DIR, "removed-shops.json")
