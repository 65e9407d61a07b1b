"""
Workout Handler - Business logic for workout scraping
Coordinates page navigation, extraction, and storage checkpoints
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from ..models import Workout
from ..resources import SessionManager, WebScraper, workout_id_from_url
from ..utils import WorkoutStore

logger = logging.getLogger(__name__)


class WorkoutHandler:
    """Handles workout scraping runs"""

    def __init__(self, session: SessionManager, store: WorkoutStore,
                 id_offset: int = 2, concurrency: int = 1):
        self.session = session
        self.store = store
        self.id_offset = id_offset
        self.concurrency = max(1, concurrency)

    async def _scrape_one(self, page, url: str) -> Optional[Workout]:
        try:
            return await WebScraper.scrape_workout(page, url, id_offset=self.id_offset)
        except Exception as e:
            logger.error(f"Failed to scrape {url}: {e}")
            return None

    def _pending(self, urls: Iterable[str], skip_ids: Iterable[str]) -> List[str]:
        skip = set(skip_ids)
        pending = []
        for url in urls:
            if workout_id_from_url(url, self.id_offset) in skip:
                logger.info(f"Skipping already scraped {url}")
                continue
            pending.append(url)
        return pending

    async def scrape_all(self, urls: Iterable[str], skip_ids: Iterable[str] = ()) -> int:
        """
        Scrape every URL and store the results

        Args:
            urls: Workout URLs, processed in order
            skip_ids: Workout ids that are not visited again

        Returns:
            Number of workouts added to the store
        """
        pending = self._pending(urls, skip_ids)
        logger.info(f"Scraping {len(pending)} workouts (concurrency={self.concurrency})")

        if self.concurrency == 1:
            added = await self._scrape_sequential(pending)
        else:
            added = await self._scrape_batched(pending)

        self.store.save()
        logger.info(f"Scraped {added}/{len(pending)} workouts")
        return added

    async def _scrape_sequential(self, urls: List[str]) -> int:
        added = 0
        page = self.session.page

        for idx, url in enumerate(urls):
            logger.info(f"Scraping workout {idx+1}/{len(urls)}: {url}")
            workout = await self._scrape_one(page, url)
            if workout is not None:
                self.store.add(workout)
                added += 1

        return added

    async def _scrape_batched(self, urls: List[str]) -> int:
        """Gather a batch on parallel tabs, then store results in input order"""
        added = 0
        pages = [self.session.page]

        try:
            for _ in range(self.concurrency - 1):
                pages.append(await self.session.new_page())

            for start in range(0, len(urls), self.concurrency):
                batch = urls[start:start + self.concurrency]
                logger.info(f"Scraping workouts {start+1}-{start+len(batch)}/{len(urls)}")

                results = await asyncio.gather(*(
                    self._scrape_one(page, url) for page, url in zip(pages, batch)
                ))

                for workout in results:
                    if workout is not None:
                        self.store.add(workout)
                        added += 1
        finally:
            for page in pages[1:]:
                await page.close()

        return added
