"""
Google Places source.

Fetching and processing are split: `fetch_raw_from_google_places` spends API
quota and writes a raw snapshot, `load_google_places` turns that snapshot
into records so the pipeline can be re-run for free.
"""
import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from src.clients import GooglePlacesClient
from src.config import GOOGLE_MAX_PAGES, GOOGLE_SEARCH_RADIUS_M, RAW_GOOGLE_PLACES_PATH, SEARCH_QUERY
from src.models import MetroArea, ShopRecord
from src.sources.metro_areas import US_METRO_AREAS
from src.storage import load_json


async def search_metro_area(
    client: GooglePlacesClient,
    metro: MetroArea,
    query: str = SEARCH_QUERY,
    max_pages: int = GOOGLE_MAX_PAGES,
) -> Tuple[List[Dict[str, Any]], int]:
    """
    Search one metro area, following pagination.

    Args:
        client (GooglePlacesClient): Places client singleton.
        metro (MetroArea): Search center.
        query (str): Text query.
        max_pages (int): Page cap (Text Search returns at most 3 pages of 20).

    Returns:
        Tuple[List[Dict[str, Any]], int]: Raw place dicts and the number of API calls made.
    """
    places: List[Dict[str, Any]] = []
    page_token: Optional[str] = None
    page_num = 0

    while True:
        page_num += 1
        try:
            data = await client.search_text(
                query, metro.lat, metro.lng, GOOGLE_SEARCH_RADIUS_M, page_token=page_token
            )
        except Exception as e:
            logger.warning(f"Error searching {metro.name} (page {page_num}): {e}")
            break

        places.extend(data.get("places") or [])
        page_token = data.get("nextPageToken")
        if not page_token or page_num >= max_pages:
            break

    return places, page_num


def transform_place(place: Dict[str, Any]) -> Optional[ShopRecord]:
    """
    Map a Places API result to a ShopRecord.

    Closed places and places without a location are skipped. Category
    filtering is left to the classifier so that decisions stay in one place.
    """
    status = place.get("businessStatus")
    if status and status != "OPERATIONAL":
        return None

    location = place.get("location") or {}
    if not location.get("latitude") or not location.get("longitude"):
        return None

    place_id = place.get("id")
    return ShopRecord(
        id=f"google-{place_id}",
        name=(place.get("displayName") or {}).get("text") or "Unknown",
        address=place.get("formattedAddress"),
        lat=location["latitude"],
        lng=location["longitude"],
        website=place.get("websiteUri"),
        phone=place.get("nationalPhoneNumber"),
        source="google-places",
        google_place_id=place_id,
        types=place.get("types") or [],
    )


def transform_raw_data(raw: Dict[str, Any]) -> List[ShopRecord]:
    """Flatten a raw snapshot into records, keeping the first sighting of each place."""
    shops: List[ShopRecord] = []
    seen_place_ids = set()

    for metro in raw.get("metros") or []:
        for place in metro.get("places") or []:
            place_id = place.get("id")
            # The same shop often shows up in several overlapping metro searches
            if place_id in seen_place_ids:
                continue
            seen_place_ids.add(place_id)

            shop = transform_place(place)
            if shop:
                shops.append(shop)

    return shops


async def load_google_places(path: str = RAW_GOOGLE_PLACES_PATH) -> List[ShopRecord]:
    """Load the raw snapshot written by the fetch step."""
    raw = load_json(path, default=None)
    if raw is None:
        logger.info(f"No raw Google Places data at {path}, skipping")
        return []
    if not isinstance(raw, dict):
        logger.warning(f"{path} is not a JSON object, returning empty")
        return []

    shops = transform_raw_data(raw)
    logger.info(f"Loaded {len(shops)} unique places from {path} (fetched {raw.get('fetchedAt')})")
    return shops


async def fetch_raw_from_google_places(
    metros: List[MetroArea] = US_METRO_AREAS,
    query: str = SEARCH_QUERY,
    dry_run: bool = False,
) -> Optional[Dict[str, Any]]:
    """
    Query every metro area and return a raw snapshot document.

    Returns:
        Optional[Dict[str, Any]]: {"fetchedAt", "apiVersion", "stats", "metros"},
                                  or None for a dry run or a missing API key.
    """
    min_requests = len(metros)
    max_requests = len(metros) * GOOGLE_MAX_PAGES

    if dry_run:
        logger.info(f"Dry run: would search {len(metros)} metro areas with pagination")
        logger.info(f"Query: {query}")
        logger.info(f"Estimated API requests: {min_requests}-{max_requests} (1-{GOOGLE_MAX_PAGES} pages per metro)")
        return None

    client = GooglePlacesClient()
    if not client.has_api_key:
        logger.error(
            "GOOGLE_PLACES_API_KEY is not set. Create a Places API key in the "
            "Google Cloud console and export GOOGLE_PLACES_API_KEY=<key> (or add it to .env)."
        )
        return None

    logger.info(f"Searching {len(metros)} US metro areas with pagination...")

    results = await asyncio.gather(*[search_metro_area(client, metro, query) for metro in metros])

    metro_results = []
    total_places = 0
    total_requests = 0
    for metro, (places, api_calls) in zip(metros, results):
        metro_results.append({"name": metro.name, "places": places})
        total_places += len(places)
        total_requests += api_calls

    logger.info(f"Found {total_places} places using {total_requests} API requests")

    return {
        "fetchedAt": datetime.now(timezone.utc).isoformat(),
        "apiVersion": "v1",
        "stats": {
            "totalMetros": len(metro_results),
            "totalPlaces": total_places,
            "totalRequests": total_requests,
        },
        "metros": metro_results,
    }
