"""
Typed data models for the skateshop collection pipeline.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class ShopRecord:
    """A candidate shop as it moves through the pipeline."""
    name: Optional[str]
    address: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None
    is_independent: Optional[bool] = None
    chain_name: Optional[str] = None

    # Internal-only fields, stripped before output
    source: Optional[str] = None  # 'osm', 'chain', 'manual', 'google-places'
    types: Optional[List[str]] = None
    google_place_id: Optional[str] = None
    osm_id: Optional[int] = None
    osm_type: Optional[str] = None
    merged_from: Optional[List[str]] = None

    id: Union[int, str, None] = None

    @property
    def external_id(self) -> Optional[str]:
        """Stable upstream identifier used for persisted review decisions."""
        if self.google_place_id:
            return self.google_place_id
        if self.osm_id is not None and self.osm_type:
            return f"osm/{self.osm_type}/{self.osm_id}"
        return None


@dataclass(frozen=True)
class ConfidenceResult:
    """Graded verdict on whether a record is a genuine skateboard shop."""
    level: str  # 'exclude' | 'review' | 'good' | 'high' | 'very_high'
    reason: str


@dataclass
class ChainCandidate:
    """A name seen in several cities that is not in the curated chain list."""
    name: str
    location_count: int
    cities: List[str]


@dataclass
class CoordinateResult:
    """Outcome of validating (and possibly geocoding) one record."""
    shop: ShopRecord
    valid: bool
    outside_region: bool = False
    geocoded: bool = False
    enriched_address: bool = False


@dataclass
class RoutedShop:
    """A record paired with the confidence verdict that routed it."""
    shop: ShopRecord
    confidence: ConfidenceResult


@dataclass
class RoutingResult:
    """Partition of records produced by confidence routing."""
    included: List[RoutedShop] = field(default_factory=list)
    pending: List[RoutedShop] = field(default_factory=list)
    excluded: List[RoutedShop] = field(default_factory=list)
    level_counts: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class RegionBounds:
    """Axis-aligned lat/lng bounding box."""
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


@dataclass(frozen=True)
class MetroArea:
    """Search center for a Google Places Text Search."""
    name: str
    lat: float
    lng: float


@dataclass
class ValidationIssue:
    message: str
    shop_id: Union[int, str, None] = None
    shop_name: Optional[str] = None


@dataclass
class ValidationResults:
    """Errors and warnings collected while validating the output file."""
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, message: str, shop_id=None, shop_name=None):
        self.errors.append(ValidationIssue(message, shop_id, shop_name))

    def add_warning(self, message: str, shop_id=None, shop_name=None):
        self.warnings.append(ValidationIssue(message, shop_id, shop_name))

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0
