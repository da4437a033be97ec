"""
Deduplication: collapses records describing the same physical shop.

Single-pass incremental clustering. Each incoming record is compared against
every cluster representative seen so far and merged into the first match.
This is O(n^2) in the number of records, which is fine for a few thousand
shops but is the hotspot if the dataset grows.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, List, Optional

from loguru import logger

from src.models import ShopRecord

# ~11 meters at mid latitudes
COORDINATE_THRESHOLD = 0.0001

SOURCE_PRIORITY = {"chain": 3, "manual": 2, "osm": 1}

_GENERIC_SUFFIX_RE = re.compile(
    r"\b(skate\s*shop|skateshop|skate\s*store|shop|store|inc|llc|ltd|co)\b",
    re.IGNORECASE | re.ASCII,
)
CITY_RE = re.compile(r",\s*([^,]+),\s*[A-Z]{2}\b", re.IGNORECASE | re.ASCII)


@dataclass
class _Entry:
    """A cluster representative with its comparison keys computed once."""
    shop: ShopRecord
    name: str
    address: str
    street: str
    city: Optional[str]


def normalize_for_comparison(text: Optional[str]) -> str:
    """Lowercase, strip punctuation and generic retail suffixes for matching."""
    if not text:
        return ""

    s = text.lower()
    s = re.sub(r"[‘’`]", "'", s)
    s = re.sub(r"[^\w\s']", " ", s, flags=re.ASCII)
    s = re.sub(r"\s+", " ", s)
    s = _GENERIC_SUFFIX_RE.sub("", s)
    return s.strip()


def extract_city(address: Optional[str]) -> Optional[str]:
    """Pull the city out of a '..., City, ST' address, normalized for matching."""
    if not address:
        return None
    match = CITY_RE.search(address)
    if match:
        return normalize_for_comparison(match.group(1))
    return None


def _precompute(shop: ShopRecord) -> _Entry:
    street = shop.address.split(",")[0] if shop.address else None
    return _Entry(
        shop=shop,
        name=normalize_for_comparison(shop.name),
        address=normalize_for_comparison(shop.address),
        street=normalize_for_comparison(street),
        city=extract_city(shop.address),
    )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def coordinate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Plain Euclidean distance in degrees; adequate at this threshold."""
    return math.sqrt((lat1 - lat2) ** 2 + (lng1 - lng2) ** 2)


def _match_by_coordinates(a: _Entry, b: _Entry) -> bool:
    s1, s2 = a.shop, b.shop
    if not all(_is_number(v) for v in (s1.lat, s1.lng, s2.lat, s2.lng)):
        return False
    return coordinate_distance(s1.lat, s1.lng, s2.lat, s2.lng) < COORDINATE_THRESHOLD


def _match_by_name_and_city(a: _Entry, b: _Entry) -> bool:
    if not a.name or not b.name or a.name != b.name:
        return False

    if a.city and b.city:
        return a.city == b.city

    # Only one side (or neither) has a city: provisional match
    return True


def _match_by_address(a: _Entry, b: _Entry) -> bool:
    if not a.address or not b.address:
        return False

    if a.address == b.address:
        return True

    if a.street and b.street and a.street == b.street:
        return bool(a.city and b.city and a.city == b.city)

    return False


def _are_duplicates(a: _Entry, b: _Entry) -> bool:
    return (
        _match_by_coordinates(a, b)
        or _match_by_name_and_city(a, b)
        or _match_by_address(a, b)
    )


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _pick(preferred: Any, fallback: Any) -> Any:
    return preferred if _present(preferred) else fallback


def merge_shops(existing: ShopRecord, incoming: ShopRecord) -> ShopRecord:
    """
    Merge two duplicate records, preferring the higher-trust source.

    Args:
        existing (ShopRecord): Current cluster representative.
        incoming (ShopRecord): Newly matched record.

    Returns:
        ShopRecord: Merged record. The base record (higher source priority,
                    incoming on a tie) wins every field it has a value for.
    """
    existing_priority = SOURCE_PRIORITY.get(existing.source, 0)
    incoming_priority = SOURCE_PRIORITY.get(incoming.source, 0)

    if incoming_priority >= existing_priority:
        base, other = incoming, existing
    else:
        base, other = existing, incoming

    merged_from: List[str] = []
    for tag in (base.merged_from or [base.source]) + (other.merged_from or [other.source]):
        if tag is not None and tag not in merged_from:
            merged_from.append(tag)

    return ShopRecord(
        id=base.id,
        name=_pick(base.name, other.name),
        address=_pick(base.address, other.address),
        lat=_pick(base.lat, other.lat),
        lng=_pick(base.lng, other.lng),
        website=_pick(base.website, other.website),
        phone=_pick(base.phone, other.phone),
        photo=_pick(base.photo, other.photo),
        is_independent=_pick(base.is_independent, other.is_independent),
        chain_name=_pick(base.chain_name, other.chain_name),
        source=base.source,
        google_place_id=_pick(base.google_place_id, other.google_place_id),
        types=_pick(base.types, other.types),
        osm_id=_pick(base.osm_id, other.osm_id),
        osm_type=_pick(base.osm_type, other.osm_type),
        merged_from=merged_from,
    )


def deduplicate_shops(shops: List[ShopRecord]) -> List[ShopRecord]:
    """
    Deduplicate shops with first-match-wins clustering.

    Results depend on input order when a record could match more than one
    cluster; the first cluster in scan order always takes it.
    """
    logger.info(f"Deduplicating {len(shops)} shops...")

    unique: List[_Entry] = []
    duplicate_count = 0

    for shop in shops:
        entry = _precompute(shop)
        for i, candidate in enumerate(unique):
            if _are_duplicates(candidate, entry):
                merged = merge_shops(candidate.shop, entry.shop)
                unique[i] = _precompute(merged)
                duplicate_count += 1
                logger.debug(f"Merged '{shop.name}' into '{merged.name}'")
                break
        else:
            unique.append(entry)

    logger.info(f"Removed {duplicate_count} duplicates, {len(unique)} unique shops remain")
    return [entry.shop for entry in unique]
