"""
JSONL logging bootstrap for the resolution strategy CLI.
Installs a single JSONL sink on the root logger.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("RESOLUTION_STRATEGY_LOG_PATH", "./resolution-strategy.log.jsonl")
DEFAULT_LEVEL = os.environ.get("RESOLUTION_STRATEGY_LOG_LEVEL", "INFO").upper()

_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime", "taskName"}
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_payload(self, record: logging.LogRecord) -> dict:
        payload = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "resolution-strategy.log", "ver": "1.0.0"},
            "logger": record.name,
            "event": getattr(record, "event", None),
            "message": record.getMessage(),
        }
        if isinstance(record.msg, dict):
            payload.update(record.msg)
        # Attach extra= fields
        for k, v in record.__dict__.items():
            if k not in _RESERVED:
                payload.setdefault(k, v)
        return payload

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_payload(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | None = None, level: str | None = None) -> None:
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    root.addHandler(JsonlHandler(path))
