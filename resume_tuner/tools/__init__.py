"""Resume Tuner Tools - file I/O around the pure domain layer."""

from .resume_exporter import EXPORT_FORMATS, ExportResult, export_resume, render_export
from .resume_reader import SUPPORTED_FORMATS, ExtractedResume, read_resume_bytes, read_resume_file

__all__ = [
    "EXPORT_FORMATS",
    "ExportResult",
    "export_resume",
    "render_export",
    "SUPPORTED_FORMATS",
    "ExtractedResume",
    "read_resume_bytes",
    "read_resume_file",
]
