# FILE: rota_core/fairness.py
from __future__ import annotations
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .clock import date_for_day_index
from .models import Group
from .scheduler import POLICIES
from .errors import InvalidConfiguration


def group_sizes(groups: Sequence[Group]) -> List[int]:
    return [len(g.employees) for g in groups]


def check_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) <= 1)


def preview_rotation(
    available: Sequence[str],
    num_groups: int,
    start_day: int,
    days: int = 7,
    policy: str = "shift",
) -> Dict[int, List[Group]]:
    """Schedules for `days` consecutive day indices starting at `start_day`."""
    if policy not in POLICIES:
        raise InvalidConfiguration(f"Unknown rotation policy: {policy!r}")
    assign = POLICIES[policy]
    return {d: assign(available, num_groups, d) for d in range(start_day, start_day + max(days, 0))}


def slot_history(schedules: Dict[int, List[Group]]) -> pd.DataFrame:
    """Participant x date table holding the group id each day."""
    rows: Dict[str, Dict[str, int]] = {}
    for d, groups in schedules.items():
        col = date_for_day_index(d).isoformat()
        for g in groups:
            for name in g.employees:
                rows.setdefault(name, {})[col] = g.id
    df = pd.DataFrame.from_dict(rows, orient="index")
    if df.empty:
        return df
    df = df.reindex(columns=[date_for_day_index(d).isoformat() for d in schedules])
    return df.sort_index()


def pairing_matrix(schedules: Dict[int, List[Group]]) -> pd.DataFrame:
    """
    How many days each pair of participants shared a group.
    The diagonal counts the days a participant was scheduled at all.
    """
    names = sorted({n for groups in schedules.values() for g in groups for n in g.employees})
    pos = {n: i for i, n in enumerate(names)}
    counts = np.zeros((len(names), len(names)), dtype=int)
    for groups in schedules.values():
        for g in groups:
            idx = [pos[n] for n in g.employees]
            for a in idx:
                counts[a, idx] += 1
    return pd.DataFrame(counts, index=names, columns=names)
