# FILE: rota_core/validation.py
from typing import List

from rota_core.config import MAX_GROUPS
from rota_core.errors import InvalidConfiguration
from rota_core.models import TIME_RE


def validate_num_groups(num_groups, upper: int = MAX_GROUPS) -> int:
    """Form-level bound on the group count; the scheduler itself only rejects <= 0."""
    try:
        n = int(num_groups)
        whole = n == float(num_groups)
    except (TypeError, ValueError):
        whole = False
    if isinstance(num_groups, bool) or not whole:
        raise InvalidConfiguration(f"Number of groups must be a whole number, got {num_groups!r}.")
    if n < 1:
        raise InvalidConfiguration("Number of groups must be at least 1.")
    if n > upper:
        raise InvalidConfiguration(f"Number of groups cannot exceed {upper}.")
    return n


def is_valid_time(value) -> bool:
    return isinstance(value, str) and bool(TIME_RE.match(value))


def validate_time_slots(slots, num_groups: int) -> List[str]:
    """
    Return human-readable problems with the slot list (empty when fine).
    Slots are dicts or objects with `start`/`end`.
    """
    problems = []
    if len(slots) < num_groups:
        problems.append(f"Expected {num_groups} time slots, got {len(slots)}.")
    for i, slot in enumerate(slots, start=1):
        start = slot.get("start") if isinstance(slot, dict) else getattr(slot, "start", None)
        end = slot.get("end") if isinstance(slot, dict) else getattr(slot, "end", None)
        # end before start is allowed: the slot runs past midnight
        if not is_valid_time(start) or not is_valid_time(end):
            problems.append(f"Group {i}: invalid time format (HH:MM).")
    return problems


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from rota_core.scheduler import assign_groups, shuffle_assign_groups
    from rota_core.fairness import check_evenness, group_sizes
    names = ["Ann", "Bob", "Cleo", "Dan", "Eve"]
    groups = assign_groups(names, 2, 10)
    results["tests"].append(("Day 10 example", [g.employees for g in groups] == [["Ann", "Cleo", "Eve"], ["Bob", "Dan"]]))
    flipped = assign_groups(names, 2, 11)
    results["tests"].append(("Day 11 flips groups", [g.employees for g in flipped] == [["Bob", "Dan"], ["Ann", "Cleo", "Eve"]]))
    results["tests"].append(("Empty roster keeps shape", [g.id for g in assign_groups([], 3, 0)] == [1, 2, 3]))
    results["tests"].append(("Balanced sizes", check_evenness(group_sizes(shuffle_assign_groups(names, 3, 20000)))))
    try:
        assign_groups(names, 0, 0)
        rejected = False
    except InvalidConfiguration:
        rejected = True
    results["tests"].append(("Zero groups rejected", rejected))
    return results
