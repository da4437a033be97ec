"""
Coordinate validation: drops records outside the region and fills missing
coordinates (or addresses) through Nominatim.
"""
import math
from dataclasses import replace
from typing import Any, Dict, List, Optional

from loguru import logger

from src.clients import NominatimClient
from src.config import ENRICH_MISSING_ADDRESS, GEOCODE_MISSING, REGION_BOUNDS
from src.models import CoordinateResult, RegionBounds, ShopRecord

DEFAULT_BOUNDS = RegionBounds(**REGION_BOUNDS)


def _valid_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def has_coordinates(shop: ShopRecord) -> bool:
    return _valid_number(shop.lat) and _valid_number(shop.lng)


def filter_to_region(shops: List[ShopRecord], bounds: RegionBounds = DEFAULT_BOUNDS) -> List[ShopRecord]:
    """Cheap pre-filter; records without coordinates are kept for later geocoding."""
    return [
        shop for shop in shops
        if not has_coordinates(shop) or bounds.contains(shop.lat, shop.lng)
    ]


async def forward_geocode(address: str) -> Optional[Dict[str, Any]]:
    """
    Look up coordinates for a free-text address.

    Returns:
        Optional[Dict[str, Any]]: {"lat", "lng", "display_name"} or None on any failure.
    """
    try:
        client = NominatimClient()
        data = await client.get_json(
            "search", {"q": address, "countrycodes": "us", "limit": "1"}
        )
        if not data:
            return None
        return {
            "lat": float(data[0]["lat"]),
            "lng": float(data[0]["lon"]),
            "display_name": data[0].get("display_name"),
        }
    except Exception as e:
        logger.debug(f"Forward geocode error for '{address}': {e}")
        return None


async def reverse_geocode(lat: float, lng: float) -> Optional[Dict[str, Any]]:
    """Look up an address for coordinates; None on any failure."""
    try:
        client = NominatimClient()
        data = await client.get_json(
            "reverse", {"lat": str(lat), "lon": str(lng), "addressdetails": "1"}
        )
        if not data or data.get("error"):
            return None
        parts = data.get("address") or {}
        return {
            "address": data.get("display_name"),
            "city": parts.get("city") or parts.get("town") or parts.get("village") or parts.get("municipality"),
            "state": parts.get("state"),
            "postcode": parts.get("postcode"),
            "country": parts.get("country"),
        }
    except Exception as e:
        logger.debug(f"Reverse geocode error for {lat},{lng}: {e}")
        return None


def format_address(address_data: Dict[str, Any]) -> Optional[str]:
    """Shorten a Nominatim display name to its first four parts."""
    if address_data.get("address"):
        return ", ".join(p.strip() for p in address_data["address"].split(",")[:4])

    parts = [address_data.get(k) for k in ("city", "state", "postcode")]
    return ", ".join(p for p in parts if p) or None


async def validate_coordinates(
    shop: ShopRecord,
    bounds: RegionBounds = DEFAULT_BOUNDS,
    geocode_missing: bool = GEOCODE_MISSING,
    enrich_missing_address: bool = ENRICH_MISSING_ADDRESS,
) -> CoordinateResult:
    """
    Validate one record's coordinates, geocoding from its address if needed.

    Args:
        shop (ShopRecord): Record to check.
        bounds (RegionBounds): Region every published coordinate must fall in.
        geocode_missing (bool): Forward-geocode records that have an address but no coordinates.
        enrich_missing_address (bool): Reverse-geocode records that have coordinates but no address.

    Returns:
        CoordinateResult: The (possibly updated) record and its verdict.
    """
    if not has_coordinates(shop):
        if geocode_missing and shop.address:
            coords = await forward_geocode(shop.address)
            if coords:
                if not bounds.contains(coords["lat"], coords["lng"]):
                    return CoordinateResult(shop, valid=False, outside_region=True)
                updated = replace(shop, lat=coords["lat"], lng=coords["lng"])
                return CoordinateResult(updated, valid=True, geocoded=True)
        return CoordinateResult(shop, valid=False)

    if not bounds.contains(shop.lat, shop.lng):
        return CoordinateResult(shop, valid=False, outside_region=True)

    if enrich_missing_address and not shop.address:
        address_data = await reverse_geocode(shop.lat, shop.lng)
        if address_data and address_data.get("address"):
            updated = replace(shop, address=format_address(address_data))
            return CoordinateResult(updated, valid=True, enriched_address=True)

    return CoordinateResult(shop, valid=True)


async def validate_all_coordinates(
    shops: List[ShopRecord],
    bounds: RegionBounds = DEFAULT_BOUNDS,
    geocode_missing: bool = GEOCODE_MISSING,
    enrich_missing_address: bool = ENRICH_MISSING_ADDRESS,
) -> List[ShopRecord]:
    """Validate every record sequentially and keep only those with usable coordinates."""
    logger.info(f"Validating coordinates for {len(shops)} shops...")

    validated: List[ShopRecord] = []
    invalid_count = 0
    outside_count = 0
    geocoded_count = 0

    for shop in shops:
        result = await validate_coordinates(
            shop,
            bounds=bounds,
            geocode_missing=geocode_missing,
            enrich_missing_address=enrich_missing_address,
        )
        if not result.valid:
            invalid_count += 1
            if result.outside_region:
                outside_count += 1
            logger.debug(f"Dropped '{shop.name}': no usable coordinates")
            continue
        if result.geocoded:
            geocoded_count += 1
        validated.append(result.shop)

    logger.info(
        f"Coordinate validation complete: {len(validated)} valid, "
        f"{invalid_count} removed ({outside_count} outside region), "
        f"{geocoded_count} geocoded from address"
    )
    return validated
