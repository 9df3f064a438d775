"""Resume Tuner - classify, preview and AI-optimize plain-text resumes."""

__version__ = "0.1.0"
