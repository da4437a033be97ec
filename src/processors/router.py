# src/processors/router.py

from typing import Iterable, List, Set

from loguru import logger

from src.models import ConfidenceResult, RoutedShop, RoutingResult, ShopRecord
from src.processors.classifier import CONFIDENCE_LEVELS, calculate_confidence

INCLUDE_LEVELS = ("good", "high", "very_high")
REVIEW_LEVELS = ("review",)

# Curated sources are published without scoring
TRUSTED_SOURCES = ("manual", "chain")


def route_by_confidence(
    shops: Iterable[ShopRecord],
    approved_ids: Set[str],
    removed_ids: Set[str],
) -> RoutingResult:
    """
    Partition records into included / pending-review / excluded.

    Persisted decisions run before scoring: removed IDs are dropped outright
    and approved IDs are included without being scored again.

    Args:
        shops (Iterable[ShopRecord]): Normalized, classified records.
        approved_ids (Set[str]): External IDs a reviewer approved in an earlier run.
        removed_ids (Set[str]): External IDs a reviewer removed in an earlier run.

    Returns:
        RoutingResult: The three partitions plus a tally per confidence level.
    """
    result = RoutingResult(level_counts={level: 0 for level in CONFIDENCE_LEVELS})

    for shop in shops:
        external_id = shop.external_id

        if external_id and external_id in removed_ids:
            result.excluded.append(RoutedShop(shop, ConfidenceResult("exclude", "Previously removed")))
            continue

        if external_id and external_id in approved_ids:
            result.included.append(RoutedShop(shop, ConfidenceResult("high", "Previously approved")))
            continue

        if shop.source in TRUSTED_SOURCES:
            result.included.append(RoutedShop(shop, ConfidenceResult("high", f"Trusted source: {shop.source}")))
            continue

        confidence = calculate_confidence(shop)
        result.level_counts[confidence.level] = result.level_counts.get(confidence.level, 0) + 1
        routed = RoutedShop(shop, confidence)

        if confidence.level in INCLUDE_LEVELS:
            result.included.append(routed)
        elif confidence.level in REVIEW_LEVELS:
            result.pending.append(routed)
        else:
            result.excluded.append(routed)

    logger.info(
        f"Confidence routing: {len(result.included)} included, "
        f"{len(result.pending)} pending review, {len(result.excluded)} excluded"
    )
    logger.debug(f"Confidence levels: {result.level_counts}")
    return result


def included_shops(result: RoutingResult) -> List[ShopRecord]:
    return [routed.shop for routed in result.included]
