"""Tests for logging setup and redaction helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from article_analyzer.config import LoggingConfig
from article_analyzer.logging_utils import redact_source, redact_text, setup_llm_logger, setup_logging, truncate_text


def test_file_logging_writes_jsonl_with_extras(tmp_path: Path):
    cfg = LoggingConfig(console=False, file=True, format="jsonl")

    logger = setup_logging(cfg, tmp_path)
    logger.info("Article text extracted", extra={"url": "https://example.com", "text_length": 512})
    for handler in logger.handlers:
        handler.flush()

    line = (tmp_path / "run.jsonl").read_text(encoding="utf-8").strip()
    record = json.loads(line)
    assert record["message"] == "Article text extracted"
    assert record["level"] == "INFO"
    assert record["text_length"] == 512


def test_llm_logger_disabled_without_directory():
    assert setup_llm_logger(LoggingConfig(llm_log_enabled=True), None) is None
    assert setup_llm_logger(LoggingConfig(llm_log_enabled=False), Path(".")) is None


def test_llm_logger_writes_to_its_own_file(tmp_path: Path):
    logger = setup_llm_logger(LoggingConfig(llm_log_enabled=True), tmp_path)

    logger.info("LLM response", extra={"status": "ok", "source": "[REDACTED_URL]"})
    for handler in logger.handlers:
        handler.flush()

    record = json.loads((tmp_path / "llm.jsonl").read_text(encoding="utf-8").strip())
    assert record["logger"] == "article_analyzer.llm"
    assert record["status"] == "ok"
    assert "msg" not in record


def test_unknown_redaction_mode_is_rejected(tmp_path: Path):
    with pytest.raises(ValueError, match="llm_log_redaction"):
        setup_llm_logger(LoggingConfig(llm_log_enabled=True, llm_log_redaction="redact_authors"), tmp_path)


def test_redact_text_modes():
    text = "Analysis of https://example.com/news/monza follows."

    assert redact_text(text, "redact_urls") == "Analysis of [REDACTED_URL] follows."
    assert redact_text(text, "redact_article_text") == ""
    assert redact_text(text, "none") == text


def test_redact_source_hides_urls_but_keeps_labels():
    assert redact_source("https://example.com/news/monza", "redact_urls") == "[REDACTED_URL]"
    assert redact_source("pasted.txt", "redact_urls") == "pasted.txt"
    assert redact_source("https://example.com/news/monza", "redact_article_text") == "https://example.com/news/monza"
    assert redact_source(None, "redact_urls") is None


def test_truncate_text():
    assert truncate_text("abcdef", max_chars=3) == "abc...(truncated)"
    assert truncate_text("abc", max_chars=3) == "abc"
