"""
Resources Package - Website interaction layer
- Session management and browser control
- Web scraping and data extraction
"""

from .session_manager import SessionManager
from .web_scraper import WebScraper, parse_workout_html, workout_id_from_url

__all__ = ['SessionManager', 'WebScraper', 'parse_workout_html', 'workout_id_from_url']
