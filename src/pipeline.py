"""
Collection pipeline: gathers candidate shops from every source and turns
them into the published data file.

collect -> region filter -> dedupe -> coordinate validation -> classify
-> chain detection (log only) -> normalize -> confidence routing
-> id assignment -> persist
"""
import asyncio
from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable, Dict, List, Optional, Set

from loguru import logger

from src import config
from src.models import RegionBounds, RoutingResult, ShopRecord
from src.processors.classifier import classify_shops, detect_potential_chains
from src.processors.deduplicator import deduplicate_shops
from src.processors.geocoder import filter_to_region, validate_all_coordinates
from src.processors.normalizer import normalize_shops, prepare_for_output
from src.processors.router import included_shops, route_by_confidence
from src.sources.google_places import load_google_places
from src.sources.manual import load_chain_stores, load_manual_additions
from src.sources.overpass import fetch_from_overpass
from src.storage import (
    build_output_document,
    load_id_set,
    write_output,
    write_pending_review,
)

SourceLoader = Callable[[], Awaitable[List[ShopRecord]]]


class PipelineError(RuntimeError):
    """Raised when a run would publish an empty dataset."""


@dataclass
class PipelineResult:
    document: Dict
    routing: RoutingResult
    source_counts: Dict[str, int] = field(default_factory=dict)


def default_sources() -> Dict[str, SourceLoader]:
    sources: Dict[str, SourceLoader] = {
        "google-places": load_google_places,
        "chain": load_chain_stores,
        "manual": load_manual_additions,
    }
    if config.OSM_ENABLED:
        sources["osm"] = fetch_from_overpass
    return sources


async def collect_from_all_sources(sources: Dict[str, SourceLoader]) -> Dict[str, List[ShopRecord]]:
    """
    Run every source loader concurrently.

    A failing loader contributes no records instead of failing the run.

    Args:
        sources (Dict[str, SourceLoader]): Source name -> async loader.

    Returns:
        Dict[str, List[ShopRecord]]: Records per source, in the order given.
    """
    names = list(sources.keys())
    results = await asyncio.gather(*[sources[name]() for name in names], return_exceptions=True)

    collected: Dict[str, List[ShopRecord]] = {}
    for name, result in zip(names, results):
        if isinstance(result, Exception):
            logger.error(f"Source '{name}' failed: {result}")
            collected[name] = []
        else:
            collected[name] = result

    for name, shops in collected.items():
        logger.info(f"Source '{name}': {len(shops)} shops")
    return collected


async def process_shops(
    shops: List[ShopRecord],
    bounds: RegionBounds,
    geocode_missing: bool = config.GEOCODE_MISSING,
    enrich_missing_address: bool = config.ENRICH_MISSING_ADDRESS,
) -> List[ShopRecord]:
    """Everything between collection and confidence routing."""
    processed = filter_to_region(shops, bounds)
    logger.info(f"After region filter: {len(processed)} shops")

    processed = deduplicate_shops(processed)

    processed = await validate_all_coordinates(
        processed,
        bounds=bounds,
        geocode_missing=geocode_missing,
        enrich_missing_address=enrich_missing_address,
    )

    processed = classify_shops(processed)

    potential_chains = detect_potential_chains(processed)
    if potential_chains:
        logger.info("Potential unknown chains detected:")
        for chain in potential_chains[:5]:
            logger.info(f"  - \"{chain.name}\" ({chain.location_count} locations)")

    return normalize_shops(processed)


def assign_ids(shops: List[ShopRecord]) -> List[ShopRecord]:
    """Sort by name and number sequentially from 1. IDs are not stable across runs."""
    ordered = sorted(shops, key=lambda s: (s.name or "").lower())
    return [replace(shop, id=index) for index, shop in enumerate(ordered, start=1)]


async def run_pipeline(
    sources: Optional[Dict[str, SourceLoader]] = None,
    output_path: str = config.OUTPUT_PATH,
    pending_path: str = config.PENDING_REVIEW_PATH,
    approved_ids: Optional[Set[str]] = None,
    removed_ids: Optional[Set[str]] = None,
    bounds: Optional[RegionBounds] = None,
    geocode_missing: bool = config.GEOCODE_MISSING,
    enrich_missing_address: bool = config.ENRICH_MISSING_ADDRESS,
) -> PipelineResult:
    """
    Run one full collection and write the output files.

    Raises:
        PipelineError: No records were collected, or none survived processing.
                       Nothing is written in that case.
    """
    sources = sources if sources is not None else default_sources()
    approved_ids = approved_ids if approved_ids is not None else load_id_set(config.APPROVED_PATH)
    removed_ids = removed_ids if removed_ids is not None else load_id_set(config.REMOVED_PATH)
    bounds = bounds or RegionBounds(**config.REGION_BOUNDS)

    logger.info("=== Collecting from all sources ===")
    collected = await collect_from_all_sources(sources)
    raw_shops = [shop for shops in collected.values() for shop in shops]

    if not raw_shops:
        raise PipelineError("No shops collected from any source!")

    logger.info("=== Processing shops ===")
    processed = await process_shops(
        raw_shops,
        bounds,
        geocode_missing=geocode_missing,
        enrich_missing_address=enrich_missing_address,
    )

    routing = route_by_confidence(processed, approved_ids, removed_ids)
    final_shops = assign_ids(included_shops(routing))

    if not final_shops:
        raise PipelineError("No shops remained after processing!")

    logger.info("=== Writing output ===")
    document = build_output_document(prepare_for_output(final_shops))
    write_output(output_path, document)
    write_pending_review(pending_path, routing.pending)

    stats = document["stats"]
    logger.info(
        f"Stats: total={stats['total']} independent={stats['independent']} "
        f"chain={stats['chain']} withWebsite={stats['withWebsite']} withPhone={stats['withPhone']}"
    )

    return PipelineResult(
        document=document,
        routing=routing,
        source_counts={name: len(shops) for name, shops in collected.items()},
    )
