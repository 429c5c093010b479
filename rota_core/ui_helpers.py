"""
Small HTML snippets shared by app.py. User text is escaped before it reaches unsafe_allow_html.
"""
from __future__ import annotations
import html
from typing import Iterable, Mapping


def group_card(group_id: int, slot: Mapping[str, str]) -> str:
    start = html.escape(str(slot.get("start", "")))
    end = html.escape(str(slot.get("end", "")))
    return f'<div class="card"><h4>Group {group_id}</h4><div class="slot">{start} - {end}</div></div>'


def chips(names: Iterable[str]) -> str:
    return "".join(f'<span class="chip">{html.escape(n)}</span>' for n in names)
