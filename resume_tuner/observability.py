"""Logging setup and an in-memory event log for AI flow calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

LOGGER_NAME = "resume_tuner"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    return root


@dataclass
class FlowEvent:
    """A single event recorded while running a flow."""

    timestamp: datetime
    event_type: str  # "llm_request", "error"
    data: Dict[str, Any]
    duration_ms: Optional[float] = None
    tokens_used: Optional[int] = None


class FlowObserver:
    """
    Collects flow events and mirrors them to the package logger.

    One observer can be shared across flows; it only ever appends.
    """

    def __init__(self) -> None:
        self.events: List[FlowEvent] = []
        self.logger = logging.getLogger(f"{LOGGER_NAME}.flows")

    def log_llm_request(
        self,
        flow: str,
        model: str,
        duration_ms: float,
        usage: Optional[Dict[str, int]] = None,
    ) -> None:
        tokens = (usage or {}).get("total_tokens")
        self.events.append(
            FlowEvent(
                timestamp=datetime.now(),
                event_type="llm_request",
                data={"flow": flow, "model": model},
                duration_ms=duration_ms,
                tokens_used=tokens,
            )
        )
        self.logger.info(f"LLM: {flow} via {model} ({duration_ms:.0f}ms, {tokens or 0} tokens)")

    def log_error(self, flow: str, error: Exception) -> None:
        self.events.append(
            FlowEvent(
                timestamp=datetime.now(),
                event_type="error",
                data={"flow": flow, "error_type": type(error).__name__, "message": str(error)},
            )
        )
        self.logger.error(f"{flow} failed: {type(error).__name__}: {error}")

    def get_summary(self) -> Dict[str, Any]:
        requests = [e for e in self.events if e.event_type == "llm_request"]
        return {
            "llm_requests": len(requests),
            "errors": sum(1 for e in self.events if e.event_type == "error"),
            "total_tokens": sum(e.tokens_used or 0 for e in requests),
            "total_duration_ms": sum(e.duration_ms or 0 for e in requests),
        }

    def clear(self) -> None:
        self.events.clear()
