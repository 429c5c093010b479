"""
rota_core package: daily group rotation, availability filtering, fairness reports, exports.
"""
from .errors import InvalidConfiguration, RotaError
from .models import Group, RotaConfig, ScheduleResult, TimeSlot
from .roster import filter_available, normalize_participants, parse_participants
from .scheduler import assign_groups, generate_schedule, move_participant, shuffle_assign_groups

__all__ = [
    "InvalidConfiguration",
    "RotaError",
    "Group",
    "RotaConfig",
    "ScheduleResult",
    "TimeSlot",
    "filter_available",
    "normalize_participants",
    "parse_participants",
    "assign_groups",
    "generate_schedule",
    "move_participant",
    "shuffle_assign_groups",
]
