import argparse
import asyncio
import json
import sys
from loguru import logger

from src.clients import GooglePlacesClient, NominatimClient, OverpassClient
from src.config import LOG_LEVEL, OUTPUT_PATH, RAW_GOOGLE_PLACES_PATH
from src.pipeline import PipelineError, run_pipeline
from src.sources.google_places import fetch_raw_from_google_places
from src.storage import load_json, save_json
from src.validation import summarize, validate_shops_data


async def close_clients():
    """Close client sessions to prevent unclosed connector warnings."""
    for client_cls in (GooglePlacesClient, NominatimClient, OverpassClient):
        if client_cls._instance is not None:
            await client_cls().close()


async def fetch(dry_run: bool) -> int:
    """
    Query Google Places and save the raw snapshot for `collect`.

    Kept separate from processing so the pipeline can be re-run without
    spending API quota.
    """
    if dry_run:
        logger.info("[DRY RUN MODE]")

    try:
        raw = await fetch_raw_from_google_places(dry_run=dry_run)
    finally:
        await close_clients()

    if dry_run:
        logger.info("Dry run complete. No data saved.")
        return 0

    if not raw or not raw["metros"]:
        logger.error("No data fetched from API!")
        return 1

    save_json(RAW_GOOGLE_PLACES_PATH, raw)
    stats = raw["stats"]
    logger.info(f"Saved raw data to: {RAW_GOOGLE_PLACES_PATH}")
    logger.info(
        f"Metros searched: {stats['totalMetros']}, places: {stats['totalPlaces']}, "
        f"API requests used: {stats['totalRequests']}"
    )
    logger.info('Next step: run "python main.py collect" to process the data.')
    return 0


async def collect() -> int:
    """Run the full pipeline; any fatal condition exits non-zero without writing output."""
    try:
        await run_pipeline()
    except PipelineError as e:
        logger.error(str(e))
        return 1
    finally:
        await close_clients()
    logger.info("Collection complete!")
    return 0


def validate(path: str) -> int:
    try:
        data = load_json(path, default=None)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading {path}: {e}")
        return 1
    if data is None:
        logger.error(f'{path} not found. Run "python main.py collect" first to generate the data file.')
        return 1

    results = validate_shops_data(data)

    if isinstance(data, dict) and isinstance(data.get("shops"), list):
        logger.info(f"Data statistics: {summarize(data)} (last updated {data.get('lastUpdated')})")

    for issue in results.errors:
        logger.error(f"{issue.message} [id={issue.shop_id} name={issue.shop_name}]")
    for issue in results.warnings:
        logger.warning(f"{issue.message} [id={issue.shop_id} name={issue.shop_name}]")
    logger.info(f"Errors: {len(results.errors)}, warnings: {len(results.warnings)}")

    if results.has_errors:
        logger.error("Validation FAILED")
        return 1
    logger.info("Validation PASSED")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the skateshop directory dataset")
    subparsers = parser.add_subparsers(dest="command")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch raw Google Places data")
    fetch_parser.add_argument("--dry-run", action="store_true", help="Only estimate API usage")
    subparsers.add_parser("collect", help="Process all sources into the data file")
    validate_parser = subparsers.add_parser("validate", help="Check the data file for quality issues")
    validate_parser.add_argument("path", nargs="?", default=OUTPUT_PATH)

    args = parser.parse_args(argv)

    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    if args.command == "fetch":
        return asyncio.run(fetch(args.dry_run))
    if args.command == "validate":
        return validate(args.path)
    return asyncio.run(collect())


if __name__ == "__main__":
    sys.exit(main())
