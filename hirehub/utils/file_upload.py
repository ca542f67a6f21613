"""
File Upload Utility - store resume files and extract their text.

Supported formats:
- PDF (.pdf) using PyPDF2
- Word (.docx) using python-docx
- Plain Text (.txt)

Max file size: settings.max_upload_mb (5MB by default)
"""

import io
import logging
import os
import re
import uuid
from typing import Iterable, List, Optional, Tuple

from docx import Document
from fastapi import HTTPException, UploadFile
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {'.pdf', '.docx', '.txt'}
# Prefix stored in file_path; also the URL path the files are served from
UPLOADS_URL_PREFIX = "Uploads"


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


async def read_upload(file: UploadFile, max_size_mb: int) -> Tuple[bytes, str]:
    """
    Validate and read an uploaded file.

    Returns:
        Tuple of (content, extension)

    Raises:
        HTTPException on validation errors
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = get_file_extension(file.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{ext}'. Allowed: PDF, DOCX, TXT"
        )

    content = await file.read()

    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    if len(content) > max_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_size_mb}MB"
        )

    return content, ext


def save_upload(content: bytes, ext: str, upload_dir: str) -> Tuple[str, str]:
    """
    Write the file as <uuid><ext> under upload_dir.

    Returns:
        Tuple of (file_path as stored on the resume, file_type without dot)
    """
    os.makedirs(upload_dir, exist_ok=True)
    unique_name = f"{uuid.uuid4()}{ext}"
    with open(os.path.join(upload_dir, unique_name), "wb") as fh:
        fh.write(content)
    return f"{UPLOADS_URL_PREFIX}/{unique_name}", ext.lstrip('.')


def delete_stored_file(file_path: Optional[str], upload_dir: str) -> bool:
    """Remove a stored resume file. Failures are logged, never raised."""
    if not file_path:
        return False
    name = os.path.basename(file_path.replace('\\', '/'))
    if not name:
        return False
    full_path = os.path.join(upload_dir, name)
    try:
        if os.path.exists(full_path):
            os.remove(full_path)
            return True
    except OSError as e:
        logger.warning("Could not delete resume file %s: %s", full_path, e)
    return False


def extract_text(content: bytes, ext: str) -> str:
    """Extract text based on file type."""
    if ext == '.pdf':
        return extract_from_pdf(content)
    if ext == '.docx':
        return extract_from_docx(content)
    return extract_from_txt(content)


def extract_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes."""
    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        return '\n'.join(text_parts)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Error reading PDF: {str(e)}")


def extract_from_docx(content: bytes) -> str:
    """Extract text from DOCX bytes."""
    try:
        doc = Document(io.BytesIO(content))
        text_parts = []

        # Extract paragraphs
        for para in doc.paragraphs:
            if para.text.strip():
                text_parts.append(para.text)

        # Extract tables
        for table in doc.tables:
            for row in table.rows:
                row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if row_text:
                    text_parts.append(' | '.join(row_text))

        return '\n'.join(text_parts)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Error reading DOCX: {str(e)}")


def extract_from_txt(content: bytes) -> str:
    """Extract text from TXT bytes."""
    for encoding in ['utf-8', 'latin-1']:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise HTTPException(status_code=400, detail="Could not decode text file")


def split_skills(raw_values: Iterable[Optional[str]]) -> List[str]:
    """Comma separated skill strings -> unique skills, first spelling wins."""
    seen = {}
    for raw in raw_values:
        for skill in (raw or "").split(','):
            skill = skill.strip()
            if skill and skill.lower() not in seen:
                seen[skill.lower()] = skill
    return list(seen.values())


def extract_skills(text: str, vocabulary: Iterable[str], max_length: int = 800) -> str:
    """
    Skills from the vocabulary that occur in the text, as a comma separated
    string no longer than max_length.
    """
    found = []
    for skill in vocabulary:
        pattern = r'(?<![\w+#])' + re.escape(skill) + r'(?![\w+#])'
        if re.search(pattern, text, flags=re.IGNORECASE):
            found.append(skill)

    result = ""
    for skill in found:
        candidate = f"{result}, {skill}" if result else skill
        if len(candidate) > max_length:
            break
        result = candidate
    return result


def get_supported_formats(max_size_mb: int) -> dict:
    """Get info about supported file formats."""
    return {
        "supported_formats": [
            {"extension": ".pdf", "name": "PDF"},
            {"extension": ".docx", "name": "Word Document"},
            {"extension": ".txt", "name": "Plain Text"}
        ],
        "max_size_mb": max_size_mb
    }
