"""
JSON persistence for the published data file, the pending-review list and
the approved/removed decision lists.
"""
import json
import os
from datetime import date
from typing import Any, Dict, List, Optional, Set

from loguru import logger

from src.config import OUTPUT_VERSION
from src.models import RoutedShop
from src.processors.normalizer import to_output_dict


def load_json(path: str, default: Any = None) -> Any:
    """Read a JSON file, returning `default` if it is missing."""
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(path: str, data: Any) -> None:
    """Write pretty-printed JSON with a trailing newline."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def load_id_set(path: str) -> Set[str]:
    """Load a flat JSON array of external IDs; missing or unreadable files give an empty set."""
    try:
        data = load_json(path, default=[])
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return set()
    if not isinstance(data, list):
        logger.warning(f"{path} is not a JSON array, ignoring")
        return set()
    return {str(item) for item in data}


def build_stats(shops: List[Dict[str, Any]]) -> Dict[str, int]:
    return {
        "total": len(shops),
        "independent": sum(1 for s in shops if s.get("isIndependent")),
        "chain": sum(1 for s in shops if not s.get("isIndependent")),
        "withWebsite": sum(1 for s in shops if s.get("website")),
        "withPhone": sum(1 for s in shops if s.get("phone")),
        "withPhoto": sum(1 for s in shops if s.get("photo")),
    }


def build_output_document(shops: List[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, Any]:
    """Wrap output-shaped records in the document the frontend loads."""
    return {
        "shops": shops,
        "lastUpdated": (today or date.today()).isoformat(),
        "version": OUTPUT_VERSION,
        "stats": build_stats(shops),
    }


def to_review_dict(routed: RoutedShop) -> Dict[str, Any]:
    """Output-shaped record plus what a reviewer needs to decide on it."""
    record = to_output_dict(routed.shop)
    if routed.shop.google_place_id:
        record["googlePlaceId"] = routed.shop.google_place_id
    record["types"] = routed.shop.types or []
    record["confidenceReason"] = routed.confidence.reason
    return record


def write_output(path: str, document: Dict[str, Any]) -> None:
    save_json(path, document)
    logger.info(f"Written {len(document['shops'])} shops to {path}")


def write_pending_review(path: str, pending: List[RoutedShop]) -> None:
    save_json(path, [to_review_dict(routed) for routed in pending])
    logger.info(f"Written {len(pending)} shops pending review to {path}")
