"""
Singleton Overpass API client with endpoint fallback.
"""
from aiohttp import ClientSession, ClientTimeout
from typing import Dict, Any, List, Optional
from loguru import logger

from src.config import OVERPASS_ENDPOINTS, USER_AGENT


class OverpassClient:
    """
    Singleton client for Overpass QL queries.
    Public Overpass instances rate-limit and time out, so every endpoint is
    tried in order before giving up.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not OverpassClient._initialized:
            self.endpoints: List[str] = list(OVERPASS_ENDPOINTS)
            self._session: Optional[ClientSession] = None
            OverpassClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            # Overpass queries over the whole region can take minutes
            self._session = ClientSession(timeout=ClientTimeout(total=180))
        return self._session

    async def query(self, overpass_ql: str) -> Dict[str, Any]:
        """
        Run a query against each endpoint until one returns valid elements.

        Returns:
            Parsed JSON body containing an "elements" list.
        """
        session = await self._get_session()
        last_error: Optional[Exception] = None

        for endpoint in self.endpoints:
            try:
                logger.info(f"Fetching from {endpoint}...")
                async with session.post(
                    endpoint,
                    data={"data": overpass_ql},
                    headers={"User-Agent": USER_AGENT},
                ) as resp:
                    if resp.status != 200:
                        raise Exception(f"HTTP {resp.status}: {resp.reason}")
                    data = await resp.json(content_type=None)
                if not isinstance(data.get("elements"), list):
                    raise Exception("Invalid response structure")
                return data
            except Exception as e:
                logger.warning(f"⚠️ Error with {endpoint}: {e}")
                last_error = e

        raise RuntimeError(f"All Overpass endpoints failed: {last_error}") from last_error

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
