# FILE: tests/test_fairness.py
import pytest

from rota_core.errors import InvalidConfiguration
from rota_core.fairness import check_evenness, group_sizes, pairing_matrix, preview_rotation, slot_history
from rota_core.scheduler import assign_groups

NAMES = ["Ann", "Bob", "Cleo", "Dan"]

def test_evenness_true_and_false():
    assert check_evenness([2, 2, 3, 2])
    assert not check_evenness([1, 5, 1, 1])
    assert check_evenness([])

def test_group_sizes():
    assert group_sizes(assign_groups(["A", "B", "C"], 2, 0)) == [2, 1]

def test_preview_covers_consecutive_days():
    schedules = preview_rotation(NAMES, 2, 100, days=3)
    assert list(schedules) == [100, 101, 102]
    assert schedules[101] == assign_groups(NAMES, 2, 101)

def test_preview_unknown_policy():
    with pytest.raises(InvalidConfiguration):
        preview_rotation(NAMES, 2, 0, policy="nope")

def test_slot_history_table():
    df = slot_history(preview_rotation(NAMES, 2, 0, days=2))
    assert list(df.index) == NAMES
    assert df.shape == (4, 2)
    assert df.loc["Ann"].tolist() == [1, 2]

def test_pairing_matrix_shift_policy_keeps_pairs():
    # With a pure shift, the same people share a group every day.
    df = pairing_matrix(preview_rotation(NAMES, 2, 0, days=4))
    assert df.loc["Ann", "Cleo"] == 4
    assert df.loc["Ann", "Bob"] == 0
    assert df.loc["Dan", "Dan"] == 4
    assert (df.values == df.values.T).all()

def test_pairing_matrix_empty():
    assert pairing_matrix({}).empty
