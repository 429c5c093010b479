# rota_core/export_xlsx.py
from __future__ import annotations
import io
import logging
import math
import re
from datetime import date
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from .models import Group

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill("solid", fgColor="FFD966")   # light orange
MEMBER_FILL = PatternFill("solid", fgColor="DDEBF7")   # light blue
HEADER_FONT = Font(color="000000", bold=True)
_thin = Side(style="thin", color="000000")
MEMBER_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)
COLUMN_WIDTH = 30
SHEET_TITLE = "Schedule"

_HHMM = re.compile(r"^\d{2}:\d{2}$")


def format_time(value: Optional[str]) -> str:
    """'13:05' -> '1:05PM'; anything not HH:MM becomes ''."""
    if not value or not _HHMM.match(value):
        return ""
    hour, minute = (int(x) for x in value.split(":"))
    ampm = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d}{ampm}"


def header_text(time_slots: Sequence[dict], group_id: int) -> str:
    if 0 < group_id <= len(time_slots):
        slot = time_slots[group_id - 1]
        return f"{format_time(slot.get('start'))} - {format_time(slot.get('end'))}"
    return "N/A - N/A"


def split_columns(members: Sequence[str]):
    mid = math.ceil(len(members) / 2)
    return list(members[:mid]), list(members[mid:])


def build_workbook(groups: Sequence[Group], time_slots: Sequence[dict]) -> Workbook:
    """
    One sheet: per group a merged, highlighted time header followed by its
    members in two columns; a blank row separates groups.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    row = 1
    for i, group in enumerate(groups):
        if i > 0:
            row += 1
        head = ws.cell(row=row, column=1, value=header_text(time_slots, group.id))
        head.font = HEADER_FONT
        head.fill = HEADER_FILL
        head.alignment = Alignment(horizontal="center", vertical="center")
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=2)

        col1, col2 = split_columns(group.employees)
        for r, name in enumerate(col1, start=1):
            for c, value in ((1, name), (2, col2[r - 1] if r - 1 < len(col2) else None)):
                if value is None:
                    continue
                cell = ws.cell(row=row + r, column=c, value=value)
                cell.fill = MEMBER_FILL
                cell.border = MEMBER_BORDER
        row += len(col1) + 1

    ws.column_dimensions["A"].width = COLUMN_WIDTH
    ws.column_dimensions["B"].width = COLUMN_WIDTH
    logger.debug("Built workbook with %d groups", len(groups))
    return wb


def export_to_xlsx_bytes(groups: Sequence[Group], time_slots: Sequence[dict]) -> bytes:
    bio = io.BytesIO()
    build_workbook(groups, time_slots).save(bio)
    bio.seek(0)
    return bio.read()


def export_filename(prefix: str = "Rota_Schedule", on_date: Optional[date] = None) -> str:
    on_date = on_date or date.today()
    return f"{prefix}_{on_date.isoformat()}.xlsx"
