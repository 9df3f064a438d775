"""HTTP JSON API for Resume Tuner."""

from .app import create_app

__all__ = ["create_app"]
