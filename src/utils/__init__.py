"""
Utilities Package - Low-level helpers
- Configuration loading
- Workout storage and JSON checkpoints
"""

from .config import ConfigError, Settings, load_settings, load_workout_urls
from .storage import WorkoutStore

__all__ = ['ConfigError', 'Settings', 'load_settings', 'load_workout_urls', 'WorkoutStore']
