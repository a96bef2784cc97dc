"""Tests for JSONL logging bootstrap."""

import json
import logging

from resolution_strategy.logging_setup import JsonlHandler
from resolution_strategy.logging_setup import init_json_logging


def test_writes_structured_lines(tmp_path):
    path = tmp_path / "logs" / "out.jsonl"
    handler = JsonlHandler(path)
    logger = logging.getLogger("resolution_strategy.test")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        logger.info("forced %s", "org:foo:2.0", extra={"event": "strategy:force", "count": 1})
    finally:
        logger.removeHandler(handler)

    line = json.loads(path.read_text().strip())
    assert line["lvl"] == "INFO"
    assert line["logger"] == "resolution_strategy.test"
    assert line["message"] == "forced org:foo:2.0"
    assert line["event"] == "strategy:force"
    assert line["count"] == 1
    assert "lineno" not in line


def test_init_does_not_duplicate_handlers(tmp_path):
    root = logging.getLogger()
    level = root.level
    try:
        init_json_logging(str(tmp_path / "a.jsonl"), "debug")
        init_json_logging(str(tmp_path / "b.jsonl"), "debug")

        handlers = [h for h in root.handlers if isinstance(h, JsonlHandler)]
        assert len(handlers) == 1
        assert handlers[0].path == tmp_path / "b.jsonl"
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            if isinstance(h, JsonlHandler):
                root.removeHandler(h)
        root.setLevel(level)
