from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.models import Exercise, Workout


WORKOUT_HTML = """
<html><body>
<h2>Tuesday, Jan 9, 2024</h2>
<div class="print-cell">
  <div class="split-left">
    <h4>A) Deadlift</h4>
    <p>Do 3 sets
Rest 1 min</p>
    <textarea>Grip gave out
Use straps next time</textarea>
  </div>
  <div class="split-left">
    <h4>B) Farmer Carry</h4>
    <p>4 x 40m</p>
  </div>
</div>
</body></html>
"""


@pytest.fixture
def workout_html() -> str:
    return WORKOUT_HTML


def make_workout(workout_id: str, date: str = "Monday") -> Workout:
    return Workout(
        id=workout_id,
        date=date,
        exercises=[Exercise(name="Squat", instructions=["5x5"])],
    )
