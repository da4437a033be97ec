"""
Field normalization: cleans and formats shop data consistently.

Every function here is total: malformed input yields None (or the name
sentinel) instead of raising.
"""
import math
import re
from dataclasses import replace
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlsplit

from loguru import logger

from src.models import ShopRecord

UNKNOWN_NAME = "Unknown Skateshop"

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
# Characters a URL host may never contain
_FORBIDDEN_HOST_RE = re.compile(r"[\s#%/:<>?@\[\\\]^|]")
_DEFAULT_PORTS = {"http": 80, "https": 443}

# Abbreviation -> period-suffixed form, only when not already followed by "."
_STREET_SUFFIXES = ["St", "Ave", "Blvd", "Rd", "Dr", "Ln", "Ct", "Pl"]
_STREET_SUFFIX_RES = [
    (re.compile(rf"\b{abbr}\b(?!\.)"), f"{abbr}.") for abbr in _STREET_SUFFIXES
]


def normalize_name(name: Optional[str]) -> str:
    """Collapse whitespace, decode common HTML entities and straighten quotes."""
    if not name:
        return UNKNOWN_NAME

    cleaned = re.sub(r"\s+", " ", str(name)).strip()
    cleaned = (
        cleaned.replace("&amp;", "&")
        .replace("&#39;", "'")
        .replace("&quot;", '"')
    )
    cleaned = re.sub(r"[‘’`]", "'", cleaned)
    cleaned = re.sub(r"[“”]", '"', cleaned)
    return cleaned or UNKNOWN_NAME


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    Format North American numbers as (XXX) XXX-XXXX.

    Any other digit count is assumed to be international and returned trimmed.
    """
    if not phone:
        return None

    raw = str(phone)
    digits = re.sub(r"\D", "", raw)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"

    # 11 digits with the US country code
    if len(digits) == 11 and digits.startswith("1"):
        return f"({digits[1:4]}) {digits[4:7]}-{digits[7:]}"

    return raw.strip()


def normalize_website(url: Optional[str]) -> Optional[str]:
    """
    Validate a website URL and normalize it to https with a lowercase host.

    Args:
        url (Optional[str]): Raw URL, possibly missing its scheme.

    Returns:
        Optional[str]: Normalized absolute URL, or None if it is not usable.
    """
    if not url or not isinstance(url, str):
        return None

    normalized = url.strip()

    if len(normalized) < 4:
        return None
    if normalized.lower() in ("http://", "https://"):
        return None

    if not _SCHEME_RE.match(normalized):
        if normalized.startswith("www.") or "." in normalized:
            normalized = "https://" + normalized
        else:
            return None

    try:
        parts = urlsplit(normalized)
        hostname = parts.hostname
        port = parts.port
        if not hostname:
            return None
        hostname = hostname.encode("idna").decode("ascii").lower()
    except (ValueError, UnicodeError):
        return None

    if "." not in hostname or _FORBIDDEN_HOST_RE.search(hostname):
        return None

    scheme = parts.scheme.lower()
    netloc = hostname
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{hostname}:{port}"

    path = quote(parts.path or "/", safe="/%:@!$&'()*+,;=-._~")

    # A bare root path is dropped along with anything after it
    if path == "/":
        return f"{scheme}://{netloc}"

    result = f"{scheme}://{netloc}{path}"
    if parts.query:
        result += f"?{parts.query}"
    if parts.fragment:
        result += f"#{parts.fragment}"
    return result


def normalize_address(address: Optional[str]) -> Optional[str]:
    """Collapse whitespace, add periods to street abbreviations, fix comma spacing."""
    if not address:
        return None

    cleaned = re.sub(r"\s+", " ", str(address)).strip()
    for pattern, replacement in _STREET_SUFFIX_RES:
        cleaned = pattern.sub(replacement, cleaned)
    cleaned = re.sub(r"\s*,\s*", ", ", cleaned)
    return cleaned or None


def normalize_coordinate(coord: Any) -> Optional[float]:
    """Round to 6 decimal places (~0.1m); non-numeric input yields None."""
    if isinstance(coord, bool) or not isinstance(coord, (int, float)):
        return None
    if not math.isfinite(coord):
        return None
    return round(float(coord), 6)


def normalize_shop(shop: ShopRecord) -> ShopRecord:
    """Normalize every free-text and numeric field of a single record."""
    return replace(
        shop,
        name=normalize_name(shop.name),
        address=normalize_address(shop.address),
        lat=normalize_coordinate(shop.lat),
        lng=normalize_coordinate(shop.lng),
        website=normalize_website(shop.website),
        phone=normalize_phone(shop.phone),
    )


def normalize_shops(shops: List[ShopRecord]) -> List[ShopRecord]:
    logger.info(f"Normalizing {len(shops)} shops...")

    normalized = [normalize_shop(shop) for shop in shops]
    if not normalized:
        return normalized

    total = len(normalized)
    with_address = sum(1 for s in normalized if s.address)
    with_website = sum(1 for s in normalized if s.website)
    with_phone = sum(1 for s in normalized if s.phone)

    logger.info(
        f"Normalization complete: "
        f"{with_address} with address ({round(with_address / total * 100)}%), "
        f"{with_website} with website ({round(with_website / total * 100)}%), "
        f"{with_phone} with phone ({round(with_phone / total * 100)}%)"
    )
    return normalized


def to_output_dict(shop: ShopRecord) -> Dict[str, Any]:
    """
    Serialize a record for the public data file.

    Internal fields (source, provenance IDs, merge history, types) are
    dropped and optional fields are omitted when empty.
    """
    output: Dict[str, Any] = {
        "id": shop.id,
        "name": shop.name,
    }
    if shop.address:
        output["address"] = shop.address
    output["lat"] = shop.lat
    output["lng"] = shop.lng

    is_independent = shop.is_independent is not False
    output["isIndependent"] = is_independent
    if not is_independent:
        output["chainName"] = shop.chain_name or "Unknown Chain"

    if shop.website:
        output["website"] = shop.website
    if shop.phone:
        output["phone"] = shop.phone
    if shop.photo:
        output["photo"] = shop.photo
    return output


def prepare_for_output(shops: List[ShopRecord]) -> List[Dict[str, Any]]:
    """Prepare shops for final output (remove internal metadata)."""
    return [to_output_dict(shop) for shop in shops]
