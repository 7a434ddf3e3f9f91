"""
pdf_report.py
=============
Generates a printable Chara Dasha timeline PDF.
Uses ReportLab for PDF generation.

Install: pip install reportlab
"""

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.lib.colors import HexColor
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable
)
from reportlab.lib.enums import TA_CENTER, TA_LEFT
import io

# ── Color palette ──────────────────────────────────────────────
VOID      = HexColor("#0B0B0F")
GOLD      = HexColor("#C9A96E")
SURFACE   = HexColor("#1E1C28")
MUTED     = HexColor("#6E6A7C")
GREEN     = HexColor("#6DBF8E")
WHITE     = HexColor("#FFFFFF")

HEADER_TABLE_STYLE = [
    ("FONTNAME",    (0,0), (-1,0),  "Helvetica-Bold"),
    ("FONTNAME",    (0,1), (-1,-1), "Helvetica"),
    ("FONTSIZE",    (0,0), (-1,-1), 8.5),
    ("BACKGROUND",  (0,0), (-1,0),  SURFACE),
    ("TEXTCOLOR",   (0,0), (-1,0),  GOLD),
    ("ROWBACKGROUNDS",(0,1),(-1,-1),[HexColor("#FAFAFA"), WHITE]),
    ("GRID",        (0,0), (-1,-1), 0.3, HexColor("#DDDDDD")),
    ("TOPPADDING",  (0,0), (-1,-1), 5),
    ("BOTTOMPADDING",(0,0),(-1,-1), 5),
    ("LEFTPADDING", (0,0), (-1,-1), 6),
]


def _period_rows(periods: list, active: dict) -> tuple:
    """Table rows for a list of period dicts, plus the index of the active one."""
    rows, active_idx = [], None
    for i, p in enumerate(periods):
        if active and p.get("start") == active.get("start") and p.get("sign") == active.get("sign"):
            active_idx = i
        rows.append([
            p.get("sign", "—"), p.get("lord", "—"),
            p.get("start", "—"), p.get("end", "—"),
            str(p.get("duration_years", p.get("duration_days", "—"))),
        ])
    return rows, active_idx


def generate_pdf_report(result: dict, name: str = "Native") -> bytes:
    """
    Generate a Chara Dasha timeline PDF report from generate_chara_dasha() output.
    Returns PDF as bytes.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=2*cm, leftMargin=2*cm,
        topMargin=2*cm, bottomMargin=2*cm,
        title=f"Chara Dasha Report — {name}",
        author="Chara Dasha API",
    )

    styles = getSampleStyleSheet()
    story = []

    # ── Custom styles ──────────────────────────────────────────
    title_style = ParagraphStyle(
        "Title", parent=styles["Normal"],
        fontSize=28, fontName="Helvetica",
        textColor=VOID, alignment=TA_CENTER,
        spaceAfter=6,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle", parent=styles["Normal"],
        fontSize=11, fontName="Helvetica",
        textColor=MUTED, alignment=TA_CENTER,
        spaceAfter=20,
    )
    body_style = ParagraphStyle(
        "Body", parent=styles["Normal"],
        fontSize=9, fontName="Helvetica",
        textColor=VOID, spaceAfter=4,
        leading=14,
    )
    disclaimer_style = ParagraphStyle(
        "Disclaimer", parent=styles["Normal"],
        fontSize=7, fontName="Helvetica-Oblique",
        textColor=MUTED, alignment=TA_CENTER,
        spaceBefore=20,
    )

    def gold_bar(text):
        return Table(
            [[Paragraph(text, ParagraphStyle("GoldBar", parent=styles["Normal"],
                fontSize=11, fontName="Helvetica-Bold",
                textColor=WHITE, alignment=TA_LEFT))]],
            colWidths=[17*cm],
            style=TableStyle([
                ("BACKGROUND", (0,0), (-1,-1), VOID),
                ("TOPPADDING",    (0,0), (-1,-1), 8),
                ("BOTTOMPADDING", (0,0), (-1,-1), 8),
                ("LEFTPADDING",   (0,0), (-1,-1), 12),
                ("RIGHTPADDING",  (0,0), (-1,-1), 12),
            ])
        )

    def period_table(periods, active, last_header):
        rows, active_idx = _period_rows(periods, active)
        table = Table(
            [["Sign", "Lord", "Start", "End", last_header]] + rows,
            colWidths=[3.6*cm, 3*cm, 3.5*cm, 3.5*cm, 3.4*cm],
            repeatRows=1,
        )
        style = list(HEADER_TABLE_STYLE)
        if active_idx is not None:
            style.append(("BACKGROUND", (0, active_idx + 1), (-1, active_idx + 1), GREEN))
        table.setStyle(TableStyle(style))
        return table

    meta = result.get("meta", {}).get("input", {})
    lagna = result.get("lagna", {})
    current = result.get("current", {})

    # ── HEADER ────────────────────────────────────────────────
    story.append(Paragraph("CHARA DASHA", title_style))
    story.append(Paragraph("Jaimini Sign Periods · Timeline Report", subtitle_style))
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Spacer(1, 0.4*cm))

    # ── CHART DETAILS ─────────────────────────────────────────
    story.append(gold_bar("CHART DETAILS"))
    story.append(Spacer(1, 0.3*cm))

    details_data = [
        ["Name", name, "Birth Date", meta.get("birth_date", "—")],
        ["Lagna", lagna.get("sign", "—"), "Direction", (result.get("direction") or "—").title()],
        ["Karakamsha", result.get("karakamsha") or "—", "As of", meta.get("on_date", "—")],
        ["Cycles", str(meta.get("number_of_cycles", "—")),
         "Dual Lords", (meta.get("dual_lord_rule") or "primary").replace("_", " ").title()],
    ]
    det_table = Table(details_data, colWidths=[4*cm, 5*cm, 3.5*cm, 4.5*cm])
    det_table.setStyle(TableStyle([
        ("FONTNAME",    (0,0), (-1,-1), "Helvetica"),
        ("FONTSIZE",    (0,0), (-1,-1), 8.5),
        ("FONTNAME",    (0,0), (0,-1), "Helvetica-Bold"),
        ("FONTNAME",    (2,0), (2,-1), "Helvetica-Bold"),
        ("TEXTCOLOR",   (0,0), (0,-1), MUTED),
        ("TEXTCOLOR",   (2,0), (2,-1), MUTED),
        ("ROWBACKGROUNDS", (0,0), (-1,-1), [HexColor("#FAFAFA"), WHITE]),
        ("GRID",        (0,0), (-1,-1), 0.3, HexColor("#E0E0E0")),
        ("TOPPADDING",  (0,0), (-1,-1), 5),
        ("BOTTOMPADDING",(0,0),(-1,-1), 5),
        ("LEFTPADDING", (0,0), (-1,-1), 6),
    ]))
    story.append(det_table)
    story.append(Spacer(1, 0.5*cm))

    # ── CHARA KARAKAS ─────────────────────────────────────────
    karakas = result.get("karakas", [])
    if karakas:
        story.append(gold_bar("CHARA KARAKAS"))
        story.append(Spacer(1, 0.3*cm))
        k_rows = [
            [k.get("karaka", "—"), k.get("planet", "—"), k.get("sign", "—"),
             f"{k.get('degree_in_sign', 0):.2f}°", k.get("navamsa_sign", "—")]
            for k in karakas
        ]
        k_table = Table([["Karaka", "Planet", "Sign", "Degree", "Navamsa"]] + k_rows,
                        colWidths=[4*cm, 3*cm, 3.5*cm, 3*cm, 3.5*cm])
        k_table.setStyle(TableStyle(HEADER_TABLE_STYLE))
        story.append(k_table)
        story.append(Spacer(1, 0.5*cm))

    # ── CURRENT PERIOD ────────────────────────────────────────
    maha = current.get("mahadasha")
    antar = current.get("antardasha")
    story.append(gold_bar("CURRENT PERIOD"))
    story.append(Spacer(1, 0.3*cm))
    if maha:
        story.append(Paragraph(
            f"<b>Mahadasha:</b> {maha['sign']} ({maha['start']} → {maha['end']}) · "
            f"{maha['progress_percent']:.1f}% complete · {maha['remaining_days']} days remaining",
            body_style
        ))
        if antar:
            story.append(Paragraph(
                f"<b>Antardasha:</b> {antar['sign']} ({antar['start']} → {antar['end']}) · "
                f"{antar['progress_percent']:.1f}% complete",
                body_style
            ))
    else:
        story.append(Paragraph("No active Chara Dasha period on this date.", body_style))
    story.append(Spacer(1, 0.5*cm))

    # ── MAHADASHA TIMELINE ────────────────────────────────────
    mahadashas = result.get("mahadashas", [])
    if mahadashas:
        story.append(gold_bar("MAHADASHA TIMELINE"))
        story.append(Spacer(1, 0.3*cm))
        story.append(period_table(mahadashas, maha, "Years"))
        story.append(Spacer(1, 0.5*cm))

    # ── ANTARDASHAS OF THE CURRENT MAHADASHA ──────────────────
    if maha:
        active_major = next(
            (m for m in mahadashas if m.get("start") == maha["start"]), None)
        if active_major and active_major.get("children"):
            story.append(gold_bar(f"ANTARDASHAS · {maha['sign'].upper()} MAHADASHA"))
            story.append(Spacer(1, 0.3*cm))
            story.append(period_table(active_major["children"], antar, "Days"))
            story.append(Spacer(1, 0.5*cm))

    # ── FOOTER DISCLAIMER ─────────────────────────────────────
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Paragraph(
        "This report is produced algorithmically for informational purposes only. "
        "Periods use whole days with 365.25-day years; sub-periods are proportional "
        "to each sign's dasha years and the last one closes on its mahadasha's end date.",
        disclaimer_style
    ))

    # ── BUILD PDF ─────────────────────────────────────────────
    doc.build(story)
    buffer.seek(0)
    return buffer.read()
