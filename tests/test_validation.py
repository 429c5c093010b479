# FILE: tests/test_validation.py
import pytest

from rota_core.errors import InvalidConfiguration
from rota_core.validation import is_valid_time, run_self_test, validate_num_groups, validate_time_slots

def test_validate_num_groups_bounds():
    assert validate_num_groups(1) == 1
    assert validate_num_groups("10") == 10
    with pytest.raises(InvalidConfiguration):
        validate_num_groups(0)
    with pytest.raises(InvalidConfiguration):
        validate_num_groups(11)
    with pytest.raises(InvalidConfiguration):
        validate_num_groups("three")

def test_is_valid_time():
    assert is_valid_time("00:00")
    assert is_valid_time("23:59")
    assert not is_valid_time("24:00")
    assert not is_valid_time("9:30")
    assert not is_valid_time(None)

def test_validate_time_slots():
    slots = [{"start": "12:00", "end": "12:30"}, {"start": "1pm", "end": "13:30"}]
    problems = validate_time_slots(slots, 3)
    assert "Expected 3 time slots, got 2." in problems
    assert "Group 2: invalid time format (HH:MM)." in problems

def test_slot_past_midnight_is_valid():
    assert validate_time_slots([{"start": "23:30", "end": "00:15"}], 1) == []

@pytest.mark.parametrize("bad", [2.7, "2.5", True])
def test_validate_num_groups_rejects_fractions(bad):
    with pytest.raises(InvalidConfiguration):
        validate_num_groups(bad)

def test_validate_num_groups_accepts_whole_float():
    assert validate_num_groups(4.0) == 4

def test_self_test_passes():
    results = run_self_test()
    assert results["tests"]
    assert all(ok for _, ok in results["tests"])
