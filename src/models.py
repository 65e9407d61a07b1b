"""
Workout Models - Scraped data records
Plain dataclasses serialized to the output JSON file
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Exercise:
    """Single exercise block of a workout"""

    name: str
    instructions: List[str] = field(default_factory=list)
    notes: Optional[List[str]] = None

    def to_dict(self) -> Dict:
        data = {
            'name': self.name,
            'instructions': list(self.instructions),
        }
        if self.notes is not None:
            data['notes'] = list(self.notes)
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'Exercise':
        notes = data.get('notes')
        return cls(
            name=data.get('name', ''),
            instructions=list(data.get('instructions', [])),
            notes=list(notes) if notes is not None else None,
        )


@dataclass(frozen=True)
class Workout:
    """Workout page: id from the URL, date header and exercises in page order"""

    id: str
    date: str
    exercises: List[Exercise] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'date': self.date,
            'exercises': [exercise.to_dict() for exercise in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Workout':
        return cls(
            id=str(data.get('id', '')),
            date=data.get('date', ''),
            exercises=[Exercise.from_dict(e) for e in data.get('exercises', [])],
        )
