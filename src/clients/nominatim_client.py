"""
Singleton Nominatim (OpenStreetMap geocoding) client with rate limiting using aiolimiter.
"""
from aiohttp import ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from typing import Dict, Any, Optional
from loguru import logger

from src.config import NOMINATIM_URL, NOMINATIM_RATE_LIMIT, USER_AGENT, HTTP_TIMEOUT_S


class NominatimClient:
    """
    Singleton client for Nominatim search and reverse lookups.
    Nominatim's usage policy allows one request per second.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not NominatimClient._initialized:
            self.base_url = NOMINATIM_URL
            self.rate_limiter = AsyncLimiter(max_rate=NOMINATIM_RATE_LIMIT, time_period=1.0)
            self._session: Optional[ClientSession] = None
            NominatimClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=HTTP_TIMEOUT_S))
        return self._session

    async def get_json(self, endpoint: str, params: Dict[str, str]) -> Any:
        """
        GET a Nominatim endpoint ("search" or "reverse") and return parsed JSON.

        Args:
            endpoint: Path under the Nominatim base URL.
            params: Query string parameters; format=json is added.

        Returns:
            Parsed JSON response (a list for search, a dict for reverse).
        """
        query = dict(params)
        query["format"] = "json"

        async with self.rate_limiter:
            session = await self._get_session()
            try:
                async with session.get(
                    f"{self.base_url}/{endpoint}",
                    params=query,
                    headers={"User-Agent": USER_AGENT},
                ) as resp:
                    if resp.status != 200:
                        raise Exception(f"HTTP {resp.status}")
                    return await resp.json()
            except Exception as e:
                logger.debug(f"⚠️ Nominatim {endpoint} request failed: {e}")
                raise

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
