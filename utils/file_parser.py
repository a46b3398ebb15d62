import io
from pathlib import Path

import pdfplumber
from docx import Document

SUPPORTED_EXTENSIONS = {'.pdf', '.docx', '.txt'}


class UnsupportedFileType(ValueError):
    pass


def extract_text(content: bytes, filename: str, content_type: str = "") -> str:
    """Extract plain text from a PDF, DOCX or TXT upload."""
    extension = Path(filename or "").suffix.lower()
    content_type = (content_type or "").lower()

    if extension == '.pdf' or "pdf" in content_type:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return "\n".join(page.extract_text() or "" for page in pdf.pages).strip()
    elif extension == '.docx' or "wordprocessingml" in content_type:
        doc = Document(io.BytesIO(content))
        return "\n".join(para.text for para in doc.paragraphs).strip()
    elif extension == '.txt' or content_type.startswith("text/"):
        return content.decode('utf-8', errors='ignore').strip()
    raise UnsupportedFileType(f"Unsupported file type: {extension or content_type or 'unknown'}")
