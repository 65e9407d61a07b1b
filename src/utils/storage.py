"""
Workout Store - In-memory aggregate with JSON checkpoints
Holds scraped workouts and writes the whole collection to one file
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from ..models import Workout
from .config import ConfigError

logger = logging.getLogger(__name__)


class WorkoutStore:
    """
    Aggregates workouts keyed by id (or as a list) and flushes them to disk

    Every `checkpoint_every` stored workouts the full state is written,
    overwriting the previous file contents. Visits that produced no workout
    (failed pages) are not counted.
    """

    def __init__(self, path: str = 'workouts.json', keyed: bool = True, checkpoint_every: int = 10):
        if checkpoint_every < 1:
            raise ValueError("checkpoint_every must be >= 1")

        self.path = Path(path)
        self.keyed = keyed
        self.checkpoint_every = checkpoint_every
        self.processed = 0
        self._by_id: Dict[str, Workout] = {}
        self._items: List[Workout] = []

    def __len__(self) -> int:
        return len(self._by_id) if self.keyed else len(self._items)

    def __contains__(self, workout_id: str) -> bool:
        if self.keyed:
            return workout_id in self._by_id
        return any(w.id == workout_id for w in self._items)

    @property
    def workouts(self) -> List[Workout]:
        return list(self._by_id.values()) if self.keyed else list(self._items)

    def add(self, workout: Workout) -> bool:
        """
        Add a workout, writing a checkpoint when due

        Returns:
            True if a checkpoint was written
        """
        if self.keyed:
            if workout.id in self._by_id:
                logger.debug(f"Overwriting workout {workout.id}")
            self._by_id[workout.id] = workout
        else:
            self._items.append(workout)

        self.processed += 1

        if self.processed % self.checkpoint_every == 0:
            self.save()
            return True
        return False

    def to_json(self) -> Union[Dict, List]:
        if self.keyed:
            return {wid: w.to_dict() for wid, w in self._by_id.items()}
        return [w.to_dict() for w in self._items]

    def save(self):
        """Write the full state, overwriting the file"""
        data = json.dumps(self.to_json(), ensure_ascii=False)
        self.path.write_text(data, encoding='utf-8')
        logger.info(f"Data written to {self.path} ({len(self)} workouts)")

    def load(self) -> int:
        """
        Load a previously written file into memory

        Returns:
            Number of workouts loaded (0 if the file does not exist)

        Raises:
            ConfigError: if the file is not valid JSON
        """
        if not self.path.exists():
            return 0

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Cannot resume from {self.path}: {e}")
            raise ConfigError(f"Invalid JSON in {self.path}: {e}")

        records = data.values() if isinstance(data, dict) else data
        for record in records:
            workout = Workout.from_dict(record)
            if self.keyed:
                self._by_id[workout.id] = workout
            else:
                self._items.append(workout)

        logger.info(f"Loaded {len(self)} workouts from {self.path}")
        return len(self)
