"""Exception types shared across the reader, flows and transports.

The domain layer never raises these; it is total over its inputs.
"""

from __future__ import annotations


class ResumeTunerError(Exception):
    """Base class for all resume_tuner failures."""


class UnsupportedFormatError(ResumeTunerError):
    """File extension is not one we can read or write."""

    def __init__(self, suffix: str, supported: tuple[str, ...]):
        self.suffix = suffix
        self.supported = supported
        super().__init__(f"Unsupported file format: {suffix or '(none)'}. Supported: {', '.join(supported)}")


class ResumeReadError(ResumeTunerError):
    """File could not be turned into text."""


class MissingInputError(ResumeTunerError):
    """A required text input was blank."""


class FlowOutputError(ResumeTunerError):
    """Model reply could not be parsed into the flow's output schema."""


class OptimizationError(ResumeTunerError):
    """User-facing failure of an AI flow after retries."""


class UploadTooLargeError(ResumeTunerError):
    """Uploaded resume exceeds the configured byte limit."""

    def __init__(self, filename: str, max_bytes: int):
        self.filename = filename
        self.max_bytes = max_bytes
        super().__init__(f"{filename or 'Upload'} exceeds the {max_bytes}-byte upload limit")
