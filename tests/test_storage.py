from __future__ import annotations

import json

import pytest

from src.utils.config import ConfigError
from src.utils.storage import WorkoutStore

from conftest import make_workout


def test_checkpoint_after_ten_workouts_holds_exactly_ten(tmp_path):
    path = tmp_path / "workouts.json"
    store = WorkoutStore(str(path), keyed=False)

    written = [store.add(make_workout(str(i))) for i in range(10)]

    assert written == [False] * 9 + [True]
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [w["id"] for w in data] == [str(i) for i in range(10)]


def test_no_file_before_first_checkpoint(tmp_path):
    path = tmp_path / "workouts.json"
    store = WorkoutStore(str(path), keyed=False)

    for i in range(9):
        store.add(make_workout(str(i)))

    assert not path.exists()


def test_keyed_duplicate_id_second_overwrites_first(tmp_path):
    path = tmp_path / "workouts.json"
    store = WorkoutStore(str(path), keyed=True)

    store.add(make_workout("380805519", date="Monday"))
    store.add(make_workout("380805519", date="Tuesday"))
    store.save()

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["380805519"]
    assert data["380805519"]["date"] == "Tuesday"
    assert len(store) == 1


def test_list_mode_keeps_duplicates(tmp_path):
    store = WorkoutStore(str(tmp_path / "workouts.json"), keyed=False)

    store.add(make_workout("1"))
    store.add(make_workout("1"))

    assert len(store) == 2


def test_save_is_deterministic_across_runs(tmp_path):
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"

    for path in (first, second):
        store = WorkoutStore(str(path))
        for wid in ("3", "1", "2"):
            store.add(make_workout(wid))
        store.save()

    assert first.read_bytes() == second.read_bytes()


def test_notes_omitted_when_absent(tmp_path):
    path = tmp_path / "workouts.json"
    store = WorkoutStore(str(path))
    store.add(make_workout("7"))
    store.save()

    exercise = json.loads(path.read_text(encoding="utf-8"))["7"]["exercises"][0]
    assert exercise == {"name": "Squat", "instructions": ["5x5"]}


def test_load_restores_saved_workouts(tmp_path):
    path = tmp_path / "workouts.json"
    store = WorkoutStore(str(path))
    store.add(make_workout("1"))
    store.add(make_workout("2"))
    store.save()

    reloaded = WorkoutStore(str(path))

    assert reloaded.load() == 2
    assert "1" in reloaded
    assert reloaded.workouts == store.workouts


def test_load_missing_file_returns_zero(tmp_path):
    assert WorkoutStore(str(tmp_path / "missing.json")).load() == 0


def test_invalid_checkpoint_interval():
    with pytest.raises(ValueError):
        WorkoutStore("workouts.json", checkpoint_every=0)


def test_write_failure_propagates(tmp_path):
    store = WorkoutStore(str(tmp_path / "missing-dir" / "workouts.json"))
    store.add(make_workout("1"))

    with pytest.raises(OSError):
        store.save()


def test_load_corrupt_file_raises_config_error(tmp_path):
    path = tmp_path / "workouts.json"
    path.write_text('{"1": {"id": ', encoding="utf-8")

    with pytest.raises(ConfigError):
        WorkoutStore(str(path)).load()
