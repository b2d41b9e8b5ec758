import csv
import io

from docx import Document

from ats_scorer.models import AnalysisResult
from ats_scorer.report_builder import build_report_csv, build_report_docx

RESULT = AnalysisResult(
    overall_score=82,
    keyword_match_score=75,
    format_score=90,
    matched_keywords=("python", "docker"),
    missing_keywords=("kubernetes",),
    improvements=("Mention Kubernetes exposure", "Quantify impact"),
)


class TestBuildReportCsv:

    def test_rows(self):
        rows = list(csv.DictReader(io.StringIO(build_report_csv(RESULT))))
        assert rows[0] == {"section": "Overall ATS score", "value": "82"}
        assert {"section": "Missing keyword", "value": "kubernetes"} in rows
        assert [r["value"] for r in rows if r["section"] == "Improvement"] == list(RESULT.improvements)
        assert len(rows) == 3 + 2 + 1 + 2


class TestBuildReportDocx:

    def test_contents(self):
        doc = Document(io.BytesIO(build_report_docx(RESULT)))
        paragraphs = [p.text for p in doc.paragraphs]

        assert "ATS Resume Analysis" in paragraphs
        assert "python, docker" in paragraphs
        assert "Quantify impact" in paragraphs

        table = doc.tables[0]
        assert table.rows[1].cells[0].text == "Overall ATS score"
        assert table.rows[1].cells[1].text == "82 / 100"

    def test_empty_lists(self):
        empty = AnalysisResult(overall_score=40, keyword_match_score=0, format_score=70, improvements=("Fix it",))
        doc = Document(io.BytesIO(build_report_docx(empty)))
        assert [p.text for p in doc.paragraphs].count("None") == 2
