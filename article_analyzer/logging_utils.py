"""Logging setup for the CLI and the separate LLM traffic log.

The run log goes to a rich console handler on stderr (stdout is reserved for
command output) and optionally to a JSONL or plain file. LLM requests and
responses are written to their own JSONL file, with the source URL and the
article text redacted according to ``LoggingConfig.llm_log_redaction``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
import re
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

REDACT_NONE = "none"
REDACT_URLS = "redact_urls"
REDACT_ARTICLE_TEXT = "redact_article_text"
REDACTION_MODES = (REDACT_NONE, REDACT_URLS, REDACT_ARTICLE_TEXT)

URL_PLACEHOLDER = "[REDACTED_URL]"

_URL_RE = re.compile(r"https?://\S+")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def setup_logging(cfg: LoggingConfig, log_dir: Path | None = None) -> logging.Logger:
    """Configure the ``article_analyzer`` logger tree for a CLI run."""
    level = _level_from_string(cfg.level)
    logger = _reset_logger("article_analyzer", level)

    if cfg.console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_path=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if cfg.file and log_dir is not None:
        if cfg.format == "jsonl":
            formatter: logging.Formatter = JsonlFormatter()
        else:
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        logger.addHandler(_file_handler(log_dir / cfg.filename, level, formatter))

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def setup_llm_logger(cfg: LoggingConfig, log_dir: Path | None) -> logging.Logger | None:
    """Return the LLM traffic logger, or None when it is disabled.

    Raises:
        ValueError: If the configured redaction mode is unknown
    """
    if cfg.llm_log_redaction not in REDACTION_MODES:
        raise ValueError(
            f"Unknown llm_log_redaction {cfg.llm_log_redaction!r}; expected one of {', '.join(REDACTION_MODES)}"
        )
    if not cfg.llm_log_enabled or log_dir is None:
        return None

    level = _level_from_string(cfg.level)
    logger = _reset_logger("article_analyzer.llm", level)
    logger.addHandler(_file_handler(log_dir / cfg.llm_log_file, level, JsonlFormatter()))
    return logger


def log_event(logger: logging.Logger | None, message: str, **fields: Any) -> None:
    if logger is not None:
        logger.info(message, extra=fields)


def redact_text(text: str, mode: str) -> str:
    """Redact prompt or response text before it reaches the LLM log.

    Examples:
        >>> redact_text("Read https://example.com/story first", "redact_urls")
        'Read [REDACTED_URL] first'
        >>> redact_text("Full article text", "redact_article_text")
        ''
    """
    if mode == REDACT_ARTICLE_TEXT:
        return ""
    if mode == REDACT_URLS:
        return _URL_RE.sub(URL_PLACEHOLDER, text)
    return text


def redact_source(source: str | None, mode: str) -> str | None:
    """Redact the article's source (a URL, or a label such as a file name).

    Only URLs are hidden; a non-URL label is kept so log lines stay traceable.
    """
    if source is None or mode != REDACT_URLS:
        return source
    return _URL_RE.sub(URL_PLACEHOLDER, source)


def truncate_text(text: str, max_chars: int = 20000) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "...(truncated)"


class JsonlFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _reset_logger(name: str, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []
    logger.propagate = False
    return logger


def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
