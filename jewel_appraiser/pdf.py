from io import BytesIO
from datetime import datetime
from typing import Dict, List

from reportlab.lib.pagesizes import landscape, letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas as rl_canvas

from .constants import HISTORY_COLUMNS, PDF_MAX_ENTRIES

# Column x offsets (inches from the left margin) and max characters per cell
_COLUMN_LAYOUT = {
    "timestamp": (0.0, 20),
    "currency": (1.75, 4),
    "description": (2.2, 22),
    "subtotal": (4.0, 12),
    "labor_cost": (4.9, 10),
    "total_cost": (5.7, 12),
    "piece_price": (6.6, 12),
    "pct_materials": (7.5, 8),
    "pct_total": (8.1, 8),
    "diagnosis": (8.7, 20),
}


def _cell(value, width: int) -> str:
    if isinstance(value, float):
        s = f"{value:,.2f}"
    else:
        s = "" if value is None else str(value)
    return s if len(s) <= width else s[:width - 1] + "…"


def build_history_pdf(history: List[Dict], limit: int = PDF_MAX_ENTRIES) -> bytes:
    buf = BytesIO()
    c = rl_canvas.Canvas(buf, pagesize=landscape(letter))
    W, H = landscape(letter)
    margin = 0.5 * inch
    row_h = 13

    def text_line(x, y, s, size=8, bold=False):
        c.setFont("Helvetica-Bold" if bold else "Helvetica", size); c.drawString(x, y, str(s))

    def header(y):
        for key, label in HISTORY_COLUMNS:
            x_in, width = _COLUMN_LAYOUT[key]
            text_line(margin + x_in * inch, y, _cell(label, width), bold=True)
        c.line(margin, y - 3, W - margin, y - 3)
        return y - row_h - 2

    c.setTitle("Appraisal history")
    y = H - margin
    text_line(margin, y, "Jewel Appraiser: appraisal history", 14, bold=True); y -= 18
    text_line(margin, y, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", 9); y -= 20
    y = header(y)

    entries = list(history or [])[:limit]
    if not entries:
        text_line(margin, y, "(No saved appraisals.)", 10)
    page = 1
    for entry in entries:
        if y < margin + row_h:
            text_line(W - margin - 0.6 * inch, margin / 2, f"Page {page}", 8)
            c.showPage(); page += 1
            y = header(H - margin)
        for key, _label in HISTORY_COLUMNS:
            x_in, width = _COLUMN_LAYOUT[key]
            text_line(margin + x_in * inch, y, _cell(entry.get(key, ""), width))
        y -= row_h
    text_line(W - margin - 0.6 * inch, margin / 2, f"Page {page}", 8)

    c.showPage()
    c.save()
    return buf.getvalue()
