#!/usr/bin/env python3
"""
TrueCoach Workout Scraper - Main Entry Point
Logs in, visits each workout page and saves the exercises to JSON
"""

import argparse
import asyncio
import logging
import sys

from src.handlers import WorkoutHandler
from src.resources import SessionManager
from src.utils import ConfigError, Settings, WorkoutStore, load_settings, load_workout_urls

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape TrueCoach workouts to a JSON file.")
    parser.add_argument("--limit", type=int, help="Only scrape the first N URLs")
    parser.add_argument("--output", help="Output JSON file (overrides OUTPUT_FILE)")
    parser.add_argument("--urls", help="JSON file with workout URLs (overrides WORKOUT_URLS_FILE)")
    parser.add_argument("--env-file", help="Path to the .env file")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--resume", action="store_true", help="Keep existing output and skip scraped ids")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags win over environment values"""
    if args.limit is not None:
        settings.url_limit = args.limit
    if args.output:
        settings.output_file = args.output
    if args.urls:
        settings.urls_file = args.urls
    if args.headed:
        settings.headless = False
    if args.verbose:
        settings.log_level = 'DEBUG'
    return settings


async def run(settings: Settings, urls, resume: bool = False) -> int:
    """
    Log in once and scrape every URL

    Returns:
        Number of workouts scraped
    """
    store = WorkoutStore(
        settings.output_file,
        keyed=settings.keyed_output,
        checkpoint_every=settings.checkpoint_every,
    )
    skip_ids = []
    if resume:
        store.load()
        skip_ids = [w.id for w in store.workouts]

    async with SessionManager(
        settings.email,
        settings.password,
        headless=settings.headless,
        navigation_timeout_ms=settings.navigation_timeout_ms,
    ) as session:
        if not await session.login():
            logger.warning("Login did not complete, scraped pages may be empty")

        handler = WorkoutHandler(
            session,
            store,
            id_offset=settings.id_segment_offset,
            concurrency=settings.concurrency,
        )
        return await handler.scrape_all(urls, skip_ids=skip_ids)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = apply_overrides(load_settings(args.env_file), args)
        logging.getLogger().setLevel(settings.log_level)
        urls = load_workout_urls(settings.urls_file, settings.url_limit)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        count = asyncio.run(run(settings, urls, resume=args.resume))
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logger.info(f"Done: {count} workouts saved to {settings.output_file}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
