"""Tests for reading resume files into plain text."""

import io

import pytest

from resume_tuner.errors import ResumeReadError, UnsupportedFormatError
from resume_tuner.tools import SUPPORTED_FORMATS, read_resume_bytes, read_resume_file


class TestTextFormats:
    def test_txt_file(self, tmp_path, sample_resume):
        path = tmp_path / "resume.txt"
        path.write_text(sample_resume, encoding="utf-8")

        result = read_resume_file(path)

        assert result.text == sample_resume
        assert result.format == ".txt"
        assert result.metadata["characters"] == len(sample_resume)

    def test_markdown_file(self, tmp_path):
        path = tmp_path / "resume.MD"
        path.write_text("# Jane Doe\n\n## Skills\n", encoding="utf-8")

        result = read_resume_file(path)

        assert result.format == ".md"
        assert result.text.startswith("# Jane Doe")

    def test_crlf_and_cr_are_normalized(self):
        result = read_resume_bytes(b"Jane Doe\r\nSummary\rBody", "resume.txt")
        assert result.text == "Jane Doe\nSummary\nBody"

    def test_utf8_bom_is_dropped(self):
        result = read_resume_bytes("\ufeffJane Doe".encode("utf-8"), "resume.txt")
        assert result.text == "Jane Doe"

    def test_invalid_utf8(self):
        with pytest.raises(ResumeReadError, match="UTF-8"):
            read_resume_bytes(b"\xff\xfe\xfa", "resume.txt")


class TestDocx:
    def test_paragraphs_and_tables(self):
        from docx import Document

        doc = Document()
        doc.add_paragraph("Jane Doe")
        doc.add_paragraph("")
        doc.add_paragraph("Experience")
        table = doc.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Acme"
        table.rows[0].cells[1].text = "2020"
        buffer = io.BytesIO()
        doc.save(buffer)

        result = read_resume_bytes(buffer.getvalue(), "resume.docx")

        assert result.format == ".docx"
        assert result.text == "Jane Doe\nExperience\nAcme\t2020"
        assert result.metadata["tables"] == 1

    def test_corrupt_docx(self):
        with pytest.raises(ResumeReadError, match="Could not read broken.docx"):
            read_resume_bytes(b"not a zip archive", "broken.docx")


class TestPdf:
    def test_pdf_text(self):
        import fitz

        doc = fitz.open()
        page = doc.new_page()
        page.insert_text((72, 72), "Jane Doe")
        data = doc.tobytes()
        doc.close()

        result = read_resume_bytes(data, "resume.pdf")

        assert result.format == ".pdf"
        assert "Jane Doe" in result.text
        assert result.metadata["pages"] == 1


class TestErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ResumeReadError, match="File not found"):
            read_resume_file(tmp_path / "nope.txt")

    def test_directory_path(self, tmp_path):
        folder = tmp_path / "resume.txt"
        folder.mkdir()
        with pytest.raises(ResumeReadError, match="Could not read") as exc_info:
            read_resume_file(folder)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_unsupported_suffix(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            read_resume_bytes(b"", "resume.rtf")
        assert exc_info.value.suffix == ".rtf"
        assert exc_info.value.supported == SUPPORTED_FORMATS
        assert "Unsupported file format: .rtf" in str(exc_info.value)

    def test_no_suffix(self):
        with pytest.raises(UnsupportedFormatError, match=r"\(none\)"):
            read_resume_bytes(b"", "resume")
