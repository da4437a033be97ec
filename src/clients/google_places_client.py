"""
Singleton Google Places client with rate limiting using aiolimiter.
"""
from aiohttp import ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from typing import Dict, Any, Optional
from loguru import logger

from src.config import GOOGLE_PLACES_API_KEY, GOOGLE_TEXT_SEARCH_URL, GOOGLE_RATE_LIMIT, HTTP_TIMEOUT_S

FIELD_MASK = ",".join([
    "places.id",
    "places.displayName",
    "places.formattedAddress",
    "places.location",
    "places.websiteUri",
    "places.nationalPhoneNumber",
    "places.types",
    "places.businessStatus",
    "nextPageToken",
])


class GooglePlacesClient:
    """
    Singleton client for the Places API (New) Text Search endpoint.
    Uses AsyncLimiter for rate limiting instead of semaphores.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not GooglePlacesClient._initialized:
            self.api_key = GOOGLE_PLACES_API_KEY
            self.base_url = GOOGLE_TEXT_SEARCH_URL
            # Google allows more, but stay conservative
            self.rate_limiter = AsyncLimiter(max_rate=GOOGLE_RATE_LIMIT, time_period=1.0)
            self._session: Optional[ClientSession] = None
            self.request_count = 0
            GooglePlacesClient._initialized = True

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=HTTP_TIMEOUT_S))
        return self._session

    async def search_text(
        self,
        query: str,
        lat: float,
        lng: float,
        radius_m: float,
        page_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Run one Text Search page biased to a circle around (lat, lng).

        Args:
            query: Free-text search query.
            lat: Circle center latitude.
            lng: Circle center longitude.
            radius_m: Circle radius in meters.
            page_token: Token from a previous page, if paginating.

        Returns:
            Parsed JSON body with "places" and optionally "nextPageToken".
        """
        body: Dict[str, Any] = {
            "textQuery": query,
            "locationBias": {
                "circle": {
                    "center": {"latitude": lat, "longitude": lng},
                    "radius": radius_m,
                },
            },
            "regionCode": "US",
        }
        if page_token:
            body["pageToken"] = page_token

        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key or "",
            "X-Goog-FieldMask": FIELD_MASK,
        }

        async with self.rate_limiter:
            session = await self._get_session()
            self.request_count += 1
            try:
                async with session.post(self.base_url, json=body, headers=headers) as resp:
                    if resp.status != 200:
                        text = await resp.text()
                        raise Exception(f"HTTP {resp.status}: {text}")
                    return await resp.json()
            except Exception as e:
                logger.debug(f"⚠️ Places search request failed: {e}")
                raise

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
