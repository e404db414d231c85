"""Structured logging utilities for the data generation lifecycle."""
import json
import logging
import uuid
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Iterator


class StructuredLogger:
    """
    Logger emitting one JSON object per line.

    Every entry carries the id of the generation run it belongs to, so the
    start, per-entity counts and outcome of one startup pass can be
    grepped together.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._run_id: str | None = None

    @staticmethod
    def generate_correlation_id() -> str:
        return f"GEN_{uuid.uuid4().hex[:12]}"

    @contextmanager
    def generation_run(self) -> Iterator[str]:
        """Tag every entry logged inside the block with a fresh run id."""
        self._run_id = self.generate_correlation_id()
        try:
            yield self._run_id
        finally:
            self._run_id = None

    def log(self, level: int, message: str, **context) -> None:
        if not self.logger.isEnabledFor(level):
            return
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": logging.getLevelName(level),
            "logger": self.logger.name,
            "message": message,
            "correlation_id": self._run_id or "none",
        }
        if context:
            entry["context"] = context
        self.logger.log(level, json.dumps(entry, default=str))

    def info(self, message: str, **context) -> None:
        self.log(logging.INFO, message, **context)

    def error(self, message: str, **context) -> None:
        self.log(logging.ERROR, message, **context)


def get_structured_logger(name: str) -> StructuredLogger:
    """Get a structured logger for ``name``."""
    return StructuredLogger(name)
