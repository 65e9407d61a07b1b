"""
Handlers Package - Business logic layer
- Workout scraping runs
"""

from .workout_handler import WorkoutHandler

__all__ = ['WorkoutHandler']
