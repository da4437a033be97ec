"""
Data-quality checks over a published shops document.
"""
import math
import re
from typing import Any, Dict, List, Tuple
from urllib.parse import urlsplit

from rapidfuzz import fuzz

from src.config import DUPLICATE_NAME_THRESHOLD, REGION_BOUNDS
from src.models import RegionBounds, ValidationResults

PHONE_RE = re.compile(r"^\(\d{3}\) \d{3}-\d{4}$")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def validate_structure(data: Any, results: ValidationResults) -> bool:
    if not isinstance(data, dict) or "shops" not in data:
        results.add_error('Missing "shops" array in file')
        return False
    if not isinstance(data["shops"], list):
        results.add_error('"shops" is not an array')
        return False
    if not data.get("lastUpdated"):
        results.add_warning('Missing "lastUpdated" field')
    if not data.get("version"):
        results.add_warning('Missing "version" field')
    return True


def validate_required_fields(shop: Dict[str, Any], results: ValidationResults):
    shop_id, name = shop.get("id"), shop.get("name")
    if not shop_id:
        results.add_error("Missing required field: id", shop_name=name)
    if not name:
        results.add_error("Missing required field: name", shop_id=shop_id)
    for key in ("lat", "lng"):
        if shop.get(key) is None:
            results.add_error(f"Missing required field: {key}", shop_id, name)
    if not isinstance(shop.get("isIndependent"), bool):
        results.add_error("Missing required field: isIndependent", shop_id, name)


def validate_coordinates(shop: Dict[str, Any], results: ValidationResults, bounds: RegionBounds):
    shop_id, name = shop.get("id"), shop.get("name")
    lat, lng = shop.get("lat"), shop.get("lng")

    if not _is_number(lat):
        results.add_error("Invalid latitude (not a number)", shop_id, name)
        return
    if not _is_number(lng):
        results.add_error("Invalid longitude (not a number)", shop_id, name)
        return

    if not bounds.contains(lat, lng):
        results.add_warning("Coordinates outside region bounds", shop_id, name)

    if lat == 0 or lng == 0:
        results.add_error("Coordinates appear to be null island (0,0)", shop_id, name)


def validate_url(shop: Dict[str, Any], results: ValidationResults):
    website = shop.get("website")
    if not website:
        return
    try:
        parts = urlsplit(website)
        valid = bool(parts.scheme and parts.netloc)
    except ValueError:
        valid = False
    if not valid:
        results.add_error("Invalid website URL format", shop.get("id"), shop.get("name"))
    elif parts.scheme not in ("http", "https"):
        results.add_warning("Website has non-HTTP protocol", shop.get("id"), shop.get("name"))


def validate_phone(shop: Dict[str, Any], results: ValidationResults):
    phone = shop.get("phone")
    # International numbers are passed through unformatted, so this is only a warning
    if phone and not PHONE_RE.match(phone):
        results.add_warning("Phone not in standard format (XXX) XXX-XXXX", shop.get("id"), shop.get("name"))


def validate_chain_fields(shop: Dict[str, Any], results: ValidationResults):
    is_chain = shop.get("isIndependent") is False
    has_chain_name = bool(shop.get("chainName"))
    if is_chain != has_chain_name:
        results.add_error("chainName must be present exactly when isIndependent is false", shop.get("id"), shop.get("name"))


def check_duplicate_ids(shops: List[Dict[str, Any]], results: ValidationResults):
    seen = set()
    duplicates = []
    for shop in shops:
        shop_id = shop.get("id")
        if shop_id in seen:
            duplicates.append(str(shop_id))
        seen.add(shop_id)
    if duplicates:
        results.add_error(f"Found {len(duplicates)} duplicate IDs: {', '.join(duplicates)}")


def check_potential_duplicates(
    shops: List[Dict[str, Any]],
    results: ValidationResults,
    threshold: float = DUPLICATE_NAME_THRESHOLD,
):
    """Warn about similarly named shops in the same ~1km grid cell."""
    cells: Dict[Tuple[int, int], List[str]] = {}
    for shop in shops:
        lat, lng = shop.get("lat"), shop.get("lng")
        if not _is_number(lat) or not _is_number(lng):
            continue
        name = (shop.get("name") or "").lower()
        cell = (round(lat * 100), round(lng * 100))
        neighbours = cells.setdefault(cell, [])
        if any(fuzz.ratio(name, other) >= threshold for other in neighbours):
            results.add_warning("Potential duplicate shop", shop.get("id"), shop.get("name"))
        neighbours.append(name)


def validate_shops_data(data: Any, bounds: RegionBounds = RegionBounds(**REGION_BOUNDS)) -> ValidationResults:
    """
    Run every check over a loaded shops document.

    Args:
        data (Any): Parsed JSON document.
        bounds (RegionBounds): Region coordinates are expected to fall in.

    Returns:
        ValidationResults: Collected errors and warnings.
    """
    results = ValidationResults()
    if not validate_structure(data, results):
        return results

    shops = data["shops"]
    for shop in shops:
        validate_required_fields(shop, results)
        validate_coordinates(shop, results, bounds)
        validate_url(shop, results)
        validate_phone(shop, results)
        validate_chain_fields(shop, results)

    check_duplicate_ids(shops, results)
    check_potential_duplicates(shops, results)
    return results


def summarize(data: Dict[str, Any]) -> Dict[str, float]:
    """Percentages of shops by label and by populated contact field."""
    shops = data.get("shops") or []
    total = len(shops)
    if not total:
        return {"total": 0}

    def pct(count: int) -> float:
        return round(count / total * 100, 1)

    return {
        "total": total,
        "independent_pct": pct(sum(1 for s in shops if s.get("isIndependent"))),
        "chain_pct": pct(sum(1 for s in shops if not s.get("isIndependent"))),
        "website_pct": pct(sum(1 for s in shops if s.get("website"))),
        "phone_pct": pct(sum(1 for s in shops if s.get("phone"))),
        "address_pct": pct(sum(1 for s in shops if s.get("address"))),
    }
