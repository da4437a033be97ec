"""
OpenStreetMap source via the Overpass API.

Legacy source kept behind OSM_ENABLED: OSM coverage of skate shops is thin
compared to Google Places, but its records outrank Google ones on merge.
"""
from typing import Any, Dict, List, Optional

from loguru import logger

from src.clients import OverpassClient
from src.config import REGION_BOUNDS
from src.models import ShopRecord


def build_query(bounds: Dict[str, float] = REGION_BOUNDS) -> str:
    """Overpass QL for skate shops and skateboard-focused sports shops."""
    bbox = f"{bounds['min_lat']},{bounds['min_lng']},{bounds['max_lat']},{bounds['max_lng']}"
    return f"""
[out:json][timeout:120];
(
  node["shop"="skate"]({bbox});
  way["shop"="skate"]({bbox});
  node["shop"="sports"]["sport"="skateboard"]({bbox});
  way["shop"="sports"]["sport"="skateboard"]({bbox});
  node["shop"]["skateboard"="yes"]({bbox});
  way["shop"]["skateboard"="yes"]({bbox});
);
out center;
""".strip()


def extract_coordinates(element: Dict[str, Any]) -> Optional[Dict[str, float]]:
    """Nodes carry lat/lon directly; ways carry a center point."""
    if element.get("lat") is not None and element.get("lon") is not None:
        return {"lat": element["lat"], "lng": element["lon"]}
    center = element.get("center")
    if center:
        return {"lat": center["lat"], "lng": center["lon"]}
    return None


def build_address(tags: Dict[str, str]) -> Optional[str]:
    parts = []
    if tags.get("addr:housenumber") and tags.get("addr:street"):
        parts.append(f"{tags['addr:housenumber']} {tags['addr:street']}")
    elif tags.get("addr:street"):
        parts.append(tags["addr:street"])

    for key in ("addr:city", "addr:state", "addr:postcode"):
        if tags.get(key):
            parts.append(tags[key])

    return ", ".join(parts) or None


def types_from_tags(tags: Dict[str, str]) -> List[str]:
    """Map OSM shop tags onto the category vocabulary the classifier scores."""
    if tags.get("shop") == "skate":
        return ["skateboard_shop", "store"]
    return ["sporting_goods_store", "store"]


def transform_element(element: Dict[str, Any]) -> Optional[ShopRecord]:
    tags = element.get("tags") or {}
    coords = extract_coordinates(element)
    if not coords:
        return None

    return ShopRecord(
        id=f"osm-{element.get('type')}-{element.get('id')}",
        name=tags.get("name") or tags.get("name:en") or "Unknown Skateshop",
        address=build_address(tags),
        lat=coords["lat"],
        lng=coords["lng"],
        website=tags.get("website") or tags.get("contact:website"),
        phone=tags.get("phone") or tags.get("contact:phone"),
        source="osm",
        types=types_from_tags(tags),
        osm_id=element.get("id"),
        osm_type=element.get("type"),
    )


async def fetch_from_overpass() -> List[ShopRecord]:
    client = OverpassClient()
    data = await client.query(build_query())

    elements = data["elements"]
    logger.info(f"Found {len(elements)} elements from OSM")

    shops = [shop for shop in (transform_element(e) for e in elements) if shop is not None]
    logger.info(f"Transformed {len(shops)} valid shops")
    return shops
