"""
Web Scraper - Low-level website interaction
Handles all direct communication with TrueCoach workout pages
Includes HTML parsing and data extraction
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from playwright.async_api import Page

from ..models import Exercise, Workout

logger = logging.getLogger(__name__)

# ============================================================================
# HTML PARSING HELPERS
# ============================================================================

DATE_SELECTOR = 'h2'
WORKOUT_BLOCK_SELECTOR = '.print-cell'
EXERCISE_SELECTOR = '.split-left'

# Runs in the page: current textarea value per exercise item, null when absent
NOTES_SCRIPT = """
(items) => items.map((item) => {
    const area = item.querySelector('textarea');
    return area ? area.value : null;
})
"""


def _text(el) -> str:
    """Extract raw text from element, keeping newlines"""
    return el.get_text() if el else ''


def _split_lines(txt: str) -> List[str]:
    return txt.split('\n')


def workout_id_from_url(url: str, offset: int = 2) -> str:
    """
    Take the path segment `offset` positions from the end of the URL

    Example:
        >>> workout_id_from_url('https://app.truecoach.co/client/workouts/380805519/edit')
        '380805519'
        >>> workout_id_from_url('https://app.truecoach.co/client/workouts/380805519', offset=1)
        '380805519'
    """
    parts = url.split('/')
    if offset < 1 or offset > len(parts):
        return ''
    return parts[-offset]


def parse_date(soup: BeautifulSoup) -> str:
    """Date header of the workout page"""
    return _text(soup.select_one(DATE_SELECTOR)).strip()


def _parse_exercise(item, notes: Optional[str] = None) -> Exercise:
    # <br> line breaks split instructions the same way as newlines
    for br in item.find_all('br'):
        br.replace_with('\n')

    name = _text(item.select_one('h4')).strip()
    instructions = _split_lines(_text(item.select_one('p')))

    if notes is None:
        area = item.select_one('textarea')
        notes = area.get_text() if area else None

    return Exercise(
        name=name,
        instructions=instructions,
        notes=_split_lines(notes) if notes is not None else None,
    )


def parse_exercises(soup: BeautifulSoup, notes: Optional[List[Optional[str]]] = None) -> List[Exercise]:
    """
    Parse exercise items inside the workout block

    Args:
        soup: parsed page
        notes: live textarea values per item, overriding the HTML text

    Returns:
        Exercises in document order, empty if the workout block is missing
    """
    block = soup.select_one(WORKOUT_BLOCK_SELECTOR)
    if not block:
        logger.warning("No workout block found")
        return []

    items = block.select(EXERCISE_SELECTOR)
    exercises = []

    for idx, item in enumerate(items):
        live_notes = notes[idx] if notes and idx < len(notes) else None
        exercises.append(_parse_exercise(item, live_notes))

    return exercises


def parse_workout_html(html: str, url: str, notes: Optional[List[Optional[str]]] = None,
                       id_offset: int = 2) -> Workout:
    """
    Build a Workout from page HTML

    Args:
        html: Raw HTML content
        url: Page URL the id is derived from
        notes: Live textarea values per exercise item
        id_offset: Path segment offset for the id

    Returns:
        Fully populated Workout
    """
    soup = BeautifulSoup(html, 'lxml')
    return Workout(
        id=workout_id_from_url(url, id_offset),
        date=parse_date(soup),
        exercises=parse_exercises(soup, notes),
    )


# ============================================================================
# PAGE INTERACTION
# ============================================================================

class WebScraper:
    """Low-level web scraping operations"""

    @staticmethod
    async def open_workout(page: Page, url: str):
        """Navigate to a workout page and wait for network idle"""
        await page.goto(url, wait_until='networkidle')

    @staticmethod
    async def read_notes(page: Page) -> List[Optional[str]]:
        """Current textarea value per exercise item"""
        selector = f'{WORKOUT_BLOCK_SELECTOR} {EXERCISE_SELECTOR}'
        return await page.eval_on_selector_all(selector, NOTES_SCRIPT)

    @staticmethod
    async def scrape_workout(page: Page, url: str, id_offset: int = 2) -> Workout:
        """
        Load a workout page and extract its data

        Args:
            page: Playwright page object
            url: Workout URL
            id_offset: Path segment offset for the id

        Returns:
            Workout record
        """
        await WebScraper.open_workout(page, url)

        html = await page.content()
        notes = await WebScraper.read_notes(page)

        workout = parse_workout_html(html, url, notes=notes, id_offset=id_offset)
        logger.info(f"Parsed workout {workout.id}: {len(workout.exercises)} exercises")
        return workout
