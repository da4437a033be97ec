"""
Classification: confidence scoring for "is this a skateboard shop" and
independent vs. chain labeling.
"""
import re
from collections import OrderedDict
from dataclasses import replace
from typing import Dict, List, Optional
from urllib.parse import urlsplit

from loguru import logger

from src.models import ChainCandidate, ConfidenceResult, ShopRecord
from src.processors.deduplicator import CITY_RE

# Upstream types that indicate a retail location
STORE_TYPES = ("store", "sporting_goods_store", "retail")

# Upstream types that rule a place out when nothing stronger matched
EXCLUDED_TYPES = (
    "ice_skating_rink",
    "skating_rink",
    "stadium",
    "arena",
    "department_store",
)

SKATE_NAME_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE) for p in (r"skate", r"sk8", r"board", r"deck", r"shred", r"thrash")
)

# Substrings that mark a non-skateboard business (matched against lowercase text)
SKIP_PATTERNS = (
    # Fingerboards / toy skateboards
    "fingerboard",
    "finger board",
    "tech deck",
    "mini skate",
    "miniskate",
    # Ice skating / hockey
    "ice skate",
    "iceskate",
    "ice rink",
    "icerink",
    "skating rink",
    "skatingrink",
    "figure skating",
    "figureskating",
    "figure skater",
    "figureskater",
    "hockey",
    "pure hockey",
    "purehockey",
    "great skate",
    "greatskate",
    "skater's edge",
    "skaters edge",
    "skatersedge",
    "ice arena",
    "icearena",
    "ice center",
    "icecenter",
    "ice centre",
    "icecentre",
    "skate sharpening",
    "skatesharpening",
    "blade sharpening",
    "bladesharpening",
    "skate anytime",
    "skateanytime",
    "synthetic ice",
    "syntheticice",
    "artificial ice",
    "artificialice",
    # Roller skating
    "roller skate",
    "rollerskate",
    "roller rink",
    "rollerrink",
    "roller derby",
    "rollerderby",
    "roller disco",
    "rollerdisco",
    # Big-box sporting goods
    "sport authority",
    "sports authority",
    "sportsauthority",
    "dick's sporting",
    "dicks sporting",
    "dickssporting",
    "big 5 sporting",
    "big5sporting",
    "academy sports",
    "academysports",
    "front row sport",
    "frontrowsport",
)

# (pattern, canonical chain name); first match wins
CHAIN_PATTERNS = (
    (re.compile(r"\bzumiez\b", re.IGNORECASE), "Zumiez"),
    (re.compile(r"\bvans\s*(store|outlet)?\b", re.IGNORECASE), "Vans"),
    (re.compile(r"\btactics\b", re.IGNORECASE), "Tactics"),
    (re.compile(r"\bccs\b", re.IGNORECASE), "CCS"),
    (re.compile(r"\btilly'?s\b", re.IGNORECASE), "Tilly's"),
    (re.compile(r"\bpacsun\b", re.IGNORECASE), "PacSun"),
    (re.compile(r"\bactive\s*ride\s*shop\b", re.IGNORECASE), "Active Ride Shop"),
    (re.compile(r"\bempire\s*skate\b", re.IGNORECASE), "Empire"),
    (re.compile(r"\bskatewarehouse\b", re.IGNORECASE), "Skate Warehouse"),
)

# (domain, canonical chain name); subdomains match too
CHAIN_WEBSITES = (
    ("zumiez.com", "Zumiez"),
    ("vans.com", "Vans"),
    ("tactics.com", "Tactics"),
    ("ccs.com", "CCS"),
    ("tillys.com", "Tilly's"),
    ("pacsun.com", "PacSun"),
    ("activeridestore.com", "Active Ride Shop"),
    ("skatewarehouse.com", "Skate Warehouse"),
)

CONFIDENCE_LEVELS = ("exclude", "review", "good", "high", "very_high")


def _website_host(website: Optional[str]) -> Optional[str]:
    """Lowercase host of a URL without a leading www., or None if unparseable."""
    if not website:
        return None
    try:
        hostname = urlsplit(website).hostname
    except ValueError:
        return None
    if not hostname:
        return None
    return re.sub(r"^www\.", "", hostname.lower())


def match_chain_by_name(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    for pattern, chain_name in CHAIN_PATTERNS:
        if pattern.search(name):
            return chain_name
    return None


def match_chain_by_website(website: Optional[str]) -> Optional[str]:
    hostname = _website_host(website)
    if not hostname:
        return None
    for domain, chain_name in CHAIN_WEBSITES:
        if hostname == domain or hostname.endswith(f".{domain}"):
            return chain_name
    return None


def _matches_skip_pattern(text: str) -> bool:
    return any(p in text for p in SKIP_PATTERNS)


def _matches_skate_pattern(text: str) -> bool:
    return any(p.search(text) for p in SKATE_NAME_PATTERNS)


def calculate_confidence(shop: ShopRecord) -> ConfidenceResult:
    """
    Grade how likely a record is to be a skateboard shop.

    Rules are evaluated in order and the first match wins, so the specific
    signals (known chain, explicit type) shadow the generic ones.

    Args:
        shop (ShopRecord): Candidate record with name, website and types.

    Returns:
        ConfidenceResult: Level in CONFIDENCE_LEVELS plus a human-readable reason.
    """
    types = shop.types or []
    name = (shop.name or "").lower()

    chain_name = match_chain_by_name(shop.name) or match_chain_by_website(shop.website)
    if chain_name:
        return ConfidenceResult("high", f"Known chain: {chain_name}")

    if "skateboard_shop" in types:
        return ConfidenceResult("high", "Has skateboard_shop type")

    has_store_type = any(t in types for t in STORE_TYPES)
    if "skateboard_park" in types and has_store_type:
        return ConfidenceResult("very_high", "Skate park with store")

    if has_store_type and _matches_skate_pattern(name):
        if _matches_skip_pattern(name):
            return ConfidenceResult("exclude", "Name matches skip pattern")
        return ConfidenceResult("good", "Store with skate-related name")

    # Skate-related domains, e.g. recskate.com
    hostname = _website_host(shop.website)
    if has_store_type and hostname and _matches_skate_pattern(hostname):
        if _matches_skip_pattern(hostname):
            return ConfidenceResult("exclude", "Website matches skip pattern")
        return ConfidenceResult("good", "Store with skate-related website")

    if any(t in types for t in EXCLUDED_TYPES):
        return ConfidenceResult("exclude", "Has excluded type")

    if _matches_skip_pattern(name):
        return ConfidenceResult("exclude", "Name matches skip pattern")

    if has_store_type:
        return ConfidenceResult("review", "Store type but no clear skateboard indicator")

    return ConfidenceResult("exclude", "No store type")


def classify_shop(shop: ShopRecord) -> ShopRecord:
    """Label a record as independent or chain, returning a new record."""
    # Source data already said it is a chain
    if shop.is_independent is False or shop.chain_name:
        return replace(shop, is_independent=False, chain_name=shop.chain_name or "Unknown Chain")

    chain_name = match_chain_by_name(shop.name) or match_chain_by_website(shop.website)
    if chain_name:
        return replace(shop, is_independent=False, chain_name=chain_name)

    return replace(shop, is_independent=True, chain_name=None)


def classify_shops(shops: List[ShopRecord]) -> List[ShopRecord]:
    logger.info(f"Classifying {len(shops)} shops...")

    classified = [classify_shop(shop) for shop in shops]
    independent = sum(1 for s in classified if s.is_independent)
    logger.info(
        f"Classification complete: {independent} independent, "
        f"{len(classified) - independent} chain stores"
    )
    return classified


def detect_potential_chains(shops: List[ShopRecord]) -> List[ChainCandidate]:
    """
    Find names that show up in several cities but are not in the chain list.

    Diagnostic only: the result is logged and never changes what is published.

    Args:
        shops (List[ShopRecord]): Classified records.

    Returns:
        List[ChainCandidate]: Candidates sorted by location count, descending.
    """
    groups: Dict[str, List[ShopRecord]] = OrderedDict()

    for shop in shops:
        if not shop.name:
            continue
        key = re.sub(r"[^\w\s]", "", shop.name.lower(), flags=re.ASCII)
        key = re.sub(r"\s+", " ", key).strip()
        groups.setdefault(key, []).append(shop)

    candidates: List[ChainCandidate] = []
    for name, locations in groups.items():
        if len(locations) < 2:
            continue

        cities: List[str] = []
        for location in locations:
            match = CITY_RE.search(location.address) if location.address else None
            if match:
                city = match.group(1).lower().strip()
                if city and city not in cities:
                    cities.append(city)

        if len(cities) >= 2:
            candidates.append(ChainCandidate(name=name, location_count=len(locations), cities=cities))

    candidates.sort(key=lambda c: c.location_count, reverse=True)
    return candidates
