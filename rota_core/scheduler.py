# rota_core/scheduler.py
from __future__ import annotations
import logging
import numbers
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .clock import day_index as current_day_index
from .errors import InvalidConfiguration
from .models import Group, ScheduleResult
from .roster import filter_available, normalize_participants

logger = logging.getLogger(__name__)

# Linear congruential constants of the seeded-shuffle policy
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def _check_group_count(num_groups) -> int:
    if isinstance(num_groups, bool) or not isinstance(num_groups, numbers.Integral):
        raise InvalidConfiguration(f"Number of groups must be an integer, got {num_groups!r}.")
    if num_groups <= 0:
        raise InvalidConfiguration("Number of groups must be greater than zero.")
    return int(num_groups)


def empty_groups(num_groups: int) -> List[Group]:
    return [Group(id=i + 1, employees=[]) for i in range(_check_group_count(num_groups))]


def assign_groups(available: Sequence[str], num_groups: int, day_index: int) -> List[Group]:
    """
    Day-shift rotation: the participant at canonical index i goes to group
    ((i + day_index) % num_groups) + 1. Each day every participant moves one
    group forward, so over num_groups consecutive days everyone visits every
    group once.

    `available` must already be filtered and in canonical order; it is not
    re-deduplicated here.
    """
    groups = empty_groups(num_groups)
    n = len(groups)
    for i, name in enumerate(available):
        groups[(i + day_index) % n].employees.append(name)
    return groups


def lcg(seed: int) -> Callable[[], float]:
    """Deterministic generator of floats in [0, 1) seeded with the day index."""
    state = seed

    def _next() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return state / LCG_MODULUS

    return _next


def seeded_shuffle(items: Sequence[str], seed: int) -> List[str]:
    """Fisher-Yates from the back, driven by `lcg(seed)`."""
    rand = lcg(seed)
    out = list(items)
    i = len(out)
    while i != 0:
        j = int(rand() * i)
        i -= 1
        out[i], out[j] = out[j], out[i]
    return out


def shuffle_assign_groups(available: Sequence[str], num_groups: int, day_index: int) -> List[Group]:
    """
    Seeded-shuffle policy: shuffle with the day index as seed, then deal the
    shuffled list round-robin starting at group 1.
    """
    groups = empty_groups(num_groups)
    n = len(groups)
    for i, name in enumerate(seeded_shuffle(available, day_index)):
        groups[i % n].employees.append(name)
    return groups


POLICIES: Dict[str, Callable[[Sequence[str], int, int], List[Group]]] = {
    "shift": assign_groups,
    "shuffle": shuffle_assign_groups,
}


def generate_schedule(
    participants: Iterable[str],
    num_groups: int,
    excluded: Iterable[str] = (),
    day_index: Optional[int] = None,
    policy: str = "shift",
) -> ScheduleResult:
    """assign(filter(participants, excluded), num_groups, day_index) plus counts for the UI."""
    if policy not in POLICIES:
        raise InvalidConfiguration(f"Unknown rotation policy: {policy!r}")
    _check_group_count(num_groups)
    if day_index is None:
        day_index = current_day_index()

    roster = normalize_participants(participants)
    available = filter_available(roster, excluded)
    groups = POLICIES[policy](available, num_groups, day_index)

    logger.info(
        "Scheduled %d of %d participants into %d groups (policy=%s, day=%d)",
        len(available), len(roster), num_groups, policy, day_index,
    )
    for g in groups:
        logger.debug("Group %d: %s", g.id, ", ".join(g.employees) or "-")

    return ScheduleResult(
        groups=groups,
        day_index=day_index,
        policy=policy,
        scheduled_count=len(available),
        excluded_count=len(roster) - len(available),
    )


def move_participant(groups: List[Group], participant: str, from_group_id: int, to_group_id: int) -> List[Group]:
    """
    Manual override: return a copy of `groups` with `participant` moved from
    one group to the end of another. The input list is left untouched.
    Rotation and balance no longer hold for the returned copy.
    """
    moved = [Group(id=g.id, employees=list(g.employees)) for g in groups]
    by_id = {g.id: g for g in moved}
    if from_group_id not in by_id or to_group_id not in by_id:
        raise ValueError(f"Unknown group id: {from_group_id if from_group_id not in by_id else to_group_id}")
    src, dst = by_id[from_group_id], by_id[to_group_id]
    if participant not in src.employees:
        raise ValueError(f"{participant!r} is not in group {from_group_id}")
    if src is dst:
        return moved
    src.employees = [e for e in src.employees if e != participant]
    dst.employees.append(participant)
    logger.info("Moved %s from group %d to group %d", participant, from_group_id, to_group_id)
    return moved
