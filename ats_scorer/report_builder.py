# ats_scorer/report_builder.py - Export one analysis result as DOCX or CSV

from __future__ import annotations

import csv
import io
from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn

from ats_scorer.models import AnalysisResult

_SCORE_ROWS = [
    ("Overall ATS score", "overall_score"),
    ("Keyword match", "keyword_match_score"),
    ("Format", "format_score"),
]
_CSV_FIELDS = ["section", "value"]


def build_report_docx(result: AnalysisResult) -> bytes:
    """
    Build a Word document with a score table, keyword lists and suggestions.
    Returns bytes ready for download.
    """
    doc = Document()

    # Title
    title = doc.add_paragraph()
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = title.add_run("ATS Resume Analysis")
    run.bold = True
    run.font.size = Pt(16)
    run.font.name = "Calibri"
    run.font.color.rgb = RGBColor(0x4F, 0x46, 0xE5)

    doc.add_paragraph()  # spacer

    table = doc.add_table(rows=1, cols=2)
    table.style = "Table Grid"

    hdr_cells = table.rows[0].cells
    for i, col_name in enumerate(["Score", "Value"]):
        hdr_cells[i].text = col_name
        run = hdr_cells[i].paragraphs[0].runs[0]
        run.bold = True
        run.font.size = Pt(10)
        run.font.name = "Calibri"
        run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
        hdr_cells[i]._tc.get_or_add_tcPr().append(_make_shading("4F46E5"))

    for label, attr in _SCORE_ROWS:
        row_cells = table.add_row().cells
        row_cells[0].text = label
        row_cells[1].text = f"{getattr(result, attr)} / 100"

    _add_list(doc, "Matched Keywords", result.matched_keywords, inline=True)
    _add_list(doc, "Missing Keywords", result.missing_keywords, inline=True)
    _add_list(doc, "Suggested Improvements", result.improvements)

    buf = io.BytesIO()
    doc.save(buf)
    buf.seek(0)
    return buf.read()


def build_report_csv(result: AnalysisResult) -> str:
    """
    Build a two-column CSV (section, value), one row per score, keyword
    and suggestion. Returns a UTF-8 string suitable for st.download_button.
    """
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=_CSV_FIELDS)
    writer.writeheader()
    for label, attr in _SCORE_ROWS:
        writer.writerow({"section": label, "value": getattr(result, attr)})
    for keyword in result.matched_keywords:
        writer.writerow({"section": "Matched keyword", "value": keyword})
    for keyword in result.missing_keywords:
        writer.writerow({"section": "Missing keyword", "value": keyword})
    for tip in result.improvements:
        writer.writerow({"section": "Improvement", "value": tip})
    return output.getvalue()


def _add_list(doc, heading: str, items, inline: bool = False):
    label = doc.add_paragraph()
    run = label.add_run(heading)
    run.bold = True
    run.font.size = Pt(12)
    run.font.name = "Calibri"
    if not items:
        doc.add_paragraph("None")
    elif inline:
        doc.add_paragraph(", ".join(items))
    else:
        for item in items:
            doc.add_paragraph(item, style="List Bullet")


def _make_shading(hex_color: str):
    """Create an OxmlElement for cell background shading."""
    from docx.oxml import OxmlElement
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), hex_color)
    return shd
