"""
Local curated sources: community-submitted shops and pre-compiled chain
store locations.
"""
import re
from typing import Any, Dict, List, Optional

from loguru import logger

from src.config import CHAIN_STORES_PATH, MANUAL_ADDITIONS_PATH
from src.models import ShopRecord
from src.storage import load_json

_LEADING_CHAIN_RES = [
    re.compile(p, re.IGNORECASE)
    for p in (r"^(Zumiez)", r"^(Vans)", r"^(Tactics)", r"^(CCS)", r"^(Tilly's)", r"^(PacSun)")
]


def extract_chain_name(name: Optional[str]) -> Optional[str]:
    """e.g. "Zumiez - Mall Location" -> "Zumiez"."""
    if not name:
        return None
    for pattern in _LEADING_CHAIN_RES:
        match = pattern.match(name)
        if match:
            return match.group(1)
    return None


def _load_array(path: str, label: str) -> Optional[List[Dict[str, Any]]]:
    stores = load_json(path, default=None)
    if stores is None:
        logger.info(f"No {label} file found at {path}, skipping")
        return None
    if not isinstance(stores, list):
        logger.warning(f"{path} is not an array, returning empty")
        return None
    logger.info(f"Loaded {len(stores)} {label}")
    return stores


async def load_manual_additions(path: str = MANUAL_ADDITIONS_PATH) -> List[ShopRecord]:
    stores = _load_array(path, "manual additions")
    if not stores:
        return []

    return [
        ShopRecord(
            id=store.get("id") or f"manual-{index}",
            name=store.get("name"),
            address=store.get("address") or None,
            lat=store.get("lat"),
            lng=store.get("lng"),
            website=store.get("website") or None,
            phone=store.get("phone") or None,
            photo=store.get("photo") or None,
            source="manual",
            google_place_id=store.get("googlePlaceId"),
            is_independent=store.get("isIndependent") is not False,
            chain_name=store.get("chainName"),
        )
        for index, store in enumerate(stores)
    ]


async def load_chain_stores(path: str = CHAIN_STORES_PATH) -> List[ShopRecord]:
    """All chain stores are marked non-independent."""
    stores = _load_array(path, "chain stores")
    if not stores:
        return []

    return [
        ShopRecord(
            id=store.get("id") or f"chain-{index}",
            name=store.get("name"),
            address=store.get("address") or None,
            lat=store.get("lat"),
            lng=store.get("lng"),
            website=store.get("website") or None,
            phone=store.get("phone") or None,
            source="chain",
            chain_name=store.get("chainName") or extract_chain_name(store.get("name")),
            is_independent=False,
        )
        for index, store in enumerate(stores)
    ]
