# ats_scorer/resume_parser.py - Extract plain text from uploaded resume files

import io

from ats_scorer.exceptions import ExtractionFailure, UnsupportedFileType

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"

_MIME_KINDS = {
    "text/plain": "txt",
    "application/pdf": "pdf",
    DOCX_MIME: "docx",
    DOC_MIME: "doc",
}
_EXTENSION_KINDS = {"txt": "txt", "pdf": "pdf", "docx": "docx", "doc": "doc"}

# .doc is accepted by the uploader so the user gets an explicit rejection message
ACCEPTED_EXTENSIONS = ["pdf", "docx", "doc", "txt"]


def _file_kind(filename: str, mime_type: str | None) -> str:
    if mime_type and mime_type in _MIME_KINDS:
        return _MIME_KINDS[mime_type]
    ext = filename.lower().rsplit(".", 1)[-1] if "." in filename else ""
    if ext in _EXTENSION_KINDS:
        return _EXTENSION_KINDS[ext]
    raise UnsupportedFileType(f"Unsupported file type: {mime_type or ('.' + ext if ext else filename)}")


def parse_resume(file_bytes: bytes, filename: str, mime_type: str | None = None) -> str:
    """
    Extract plain text from a resume file.
    Supports: .pdf, .docx, .txt. Legacy .doc files are rejected.

    The MIME type wins when it is one we know; otherwise the extension decides.
    Raises UnsupportedFileType or ExtractionFailure.
    """
    kind = _file_kind(filename, mime_type)

    if kind == "docx":
        return _parse_docx(file_bytes)
    elif kind == "pdf":
        return _parse_pdf(file_bytes)
    elif kind == "txt":
        return file_bytes.decode("utf-8", errors="ignore")
    else:
        raise UnsupportedFileType("Legacy .doc files are not supported. Save the resume as .docx or PDF.")


def _parse_docx(file_bytes: bytes) -> str:
    from docx import Document
    try:
        doc = Document(io.BytesIO(file_bytes))
    except Exception as e:
        raise ExtractionFailure(f"Could not read DOCX: {e}")
    lines = []
    for para in doc.paragraphs:
        text = para.text.strip()
        if text:
            lines.append(text)
    # Also grab text from tables (some resumes use them)
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                text = cell.text.strip()
                if text and text not in lines:
                    lines.append(text)
    return "\n".join(lines)


def _parse_pdf(file_bytes: bytes) -> str:
    import pdfplumber
    try:
        with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
            pages = []
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    pages.append(text)
    except Exception as e:
        raise ExtractionFailure(f"Could not read PDF: {e}. Try converting to .docx or .txt.")
    return "\n".join(pages)
