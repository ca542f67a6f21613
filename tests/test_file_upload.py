"""
Tests for resume file handling and skill extraction.
"""

import io

import pytest
from docx import Document
from fastapi import HTTPException, UploadFile

from hirehub.utils.file_upload import (
    delete_stored_file, extract_from_docx, extract_from_txt, extract_skills, extract_text,
    get_file_extension, read_upload, save_upload, split_skills
)


def _upload_file(filename, content):
    return UploadFile(file=io.BytesIO(content), filename=filename)


class TestExtensions:
    @pytest.mark.parametrize("filename,expected", [
        ("cv.PDF", ".pdf"),
        ("my.resume.docx", ".docx"),
        ("README", ""),
    ])
    def test_get_file_extension(self, filename, expected):
        assert get_file_extension(filename) == expected


class TestReadUpload:
    @pytest.mark.asyncio
    async def test_valid(self):
        content, ext = await read_upload(_upload_file("cv.txt", b"hello"), max_size_mb=1)
        assert content == b"hello"
        assert ext == ".txt"

    @pytest.mark.asyncio
    async def test_unsupported_type(self):
        with pytest.raises(HTTPException) as exc_info:
            await read_upload(_upload_file("cv.png", b"\x89PNG"), max_size_mb=1)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_too_large(self):
        with pytest.raises(HTTPException) as exc_info:
            await read_upload(_upload_file("cv.txt", b"x" * (1024 * 1024 + 1)), max_size_mb=1)
        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_empty(self):
        with pytest.raises(HTTPException) as exc_info:
            await read_upload(_upload_file("cv.txt", b""), max_size_mb=1)
        assert exc_info.value.status_code == 400


class TestStorage:
    def test_save_and_delete(self, tmp_path):
        file_path, file_type = save_upload(b"data", ".pdf", str(tmp_path))
        assert file_path.startswith("Uploads/") and file_path.endswith(".pdf")
        assert file_type == "pdf"

        name = file_path.split("/", 1)[1]
        assert (tmp_path / name).read_bytes() == b"data"
        assert delete_stored_file(file_path, str(tmp_path)) is True
        assert not (tmp_path / name).exists()

    def test_delete_missing_file(self, tmp_path):
        assert delete_stored_file("Uploads/nothing.pdf", str(tmp_path)) is False
        assert delete_stored_file(None, str(tmp_path)) is False

    def test_delete_ignores_directories_in_path(self, tmp_path):
        """Only the file name is used, so paths cannot escape the upload folder."""
        (tmp_path / "cv.txt").write_bytes(b"x")
        assert delete_stored_file("../../elsewhere/cv.txt", str(tmp_path)) is True


class TestTextExtraction:
    def test_txt_latin1_fallback(self):
        assert extract_from_txt("Café".encode("latin-1")) == "Café"

    def test_docx_paragraphs_and_tables(self):
        document = Document()
        document.add_paragraph("Senior engineer")
        table = document.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Skills"
        table.rows[0].cells[1].text = "Python"
        buffer = io.BytesIO()
        document.save(buffer)

        text = extract_from_docx(buffer.getvalue())
        assert "Senior engineer" in text
        assert "Skills | Python" in text

    def test_broken_pdf(self):
        with pytest.raises(HTTPException) as exc_info:
            extract_text(b"not a pdf", ".pdf")
        assert exc_info.value.status_code == 400


class TestSkills:
    def test_split_skills_dedupes(self):
        assert split_skills(["Python, SQL", "sql, Docker,", None]) == ["Python", "SQL", "Docker"]

    def test_whole_word_matching(self):
        text = "Built services in JavaScript and C++ with some Go."
        assert extract_skills(text, ["Java", "JavaScript", "C", "C++", "Go"]) == "JavaScript, C++, Go"

    def test_case_insensitive(self):
        assert extract_skills("PYTHON developer", ["Python"]) == "Python"

    def test_respects_max_length(self):
        assert extract_skills("alpha beta gamma", ["alpha", "beta", "gamma"], max_length=11) == "alpha, beta"
