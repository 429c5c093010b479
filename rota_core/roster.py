# rota_core/roster.py
from __future__ import annotations
from typing import Iterable, List


def _clean(values: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for v in values:
        if v is None:
            continue
        name = str(v).strip()
        if not name or name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out


def parse_participants(text: str) -> List[str]:
    """One participant per line; trimmed, blanks dropped, first-seen order kept."""
    if not text:
        return []
    return _clean(text.splitlines())


def canonical_key(name: str):
    return (name.casefold(), name)


def normalize_participants(participants: Iterable[str]) -> List[str]:
    """Trim, drop blanks, deduplicate and sort into canonical order."""
    return sorted(_clean(participants), key=canonical_key)


def filter_available(participants: Iterable[str], excluded: Iterable[str] = ()) -> List[str]:
    """
    Availability filter: normalized participants minus the excluded ones.
    Membership is exact string equality; excluded values are not trimmed.
    """
    out = set(excluded or ())
    return [p for p in normalize_participants(participants) if p not in out]


def unknown_exclusions(participants: Iterable[str], excluded: Iterable[str]) -> List[str]:
    known = set(_clean(participants))
    return [e for e in dict.fromkeys(excluded or ()) if e not in known]
