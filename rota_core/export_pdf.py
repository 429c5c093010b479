# rota_core/export_pdf.py
from __future__ import annotations
from typing import List, Sequence
import io
import logging
from reportlab.lib.pagesizes import letter
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .export_xlsx import header_text
from .models import Group

logger = logging.getLogger(__name__)


def schedule_rows(groups: Sequence[Group], time_slots: Sequence[dict]) -> List[List[str]]:
    data = [["Group", "Time", "Members"]]
    for g in groups:
        data.append([f"Group {g.id}", header_text(time_slots, g.id), ", ".join(g.employees) or "-"])
    return data


def render_pdf(groups: Sequence[Group], time_slots: Sequence[dict], title: str = "Daily Rotation") -> bytes:
    buf = io.BytesIO()
    page_size = letter
    c = canvas.Canvas(buf, pagesize=page_size)

    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, title)

    t = Table(schedule_rows(groups, time_slots), repeatRows=1, colWidths=[70, 130, 330])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#FFD966")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("BACKGROUND", (0,1), (-1,-1), colors.HexColor("#DDEBF7")),
        ("GRID", (0,0), (-1,-1), 0.5, colors.black),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))

    table_w, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    t.drawOn(c, 40, page_size[1] - 70 - table_h)

    c.showPage()
    c.save()
    logger.debug("Rendered PDF for %d groups", len(groups))
    return buf.getvalue()
