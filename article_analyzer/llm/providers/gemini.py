"""Google Gemini provider for article analysis."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ...config import AnalysisConfig, LoggingConfig, ProviderConfig
from ...core.errors import AnalysisFailed
from ...core.types import AnalysisResult, Sentiment
from ...logging_utils import log_event, redact_source, redact_text, truncate_text
from .base import AnalysisProvider

logger = logging.getLogger(__name__)

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {
            "type": "STRING",
            "description": "A concise summary of the article.",
        },
        "keywords": {
            "type": "ARRAY",
            "items": {"type": "STRING", "description": "A keyword or hot topic."},
            "description": "Key topics from the article (people, teams, places, technical terms).",
        },
        "sentiment": {
            "type": "STRING",
            "enum": [s.value for s in Sentiment],
            "description": "The overall sentiment of the article.",
        },
        "sentimentReason": {
            "type": "STRING",
            "description": "A brief, one-sentence explanation for the sentiment classification.",
        },
    },
    "required": ["summary", "keywords", "sentiment", "sentimentReason"],
}


class GeminiProvider(AnalysisProvider):
    """Gemini-backed provider returning structured JSON analysis."""

    def __init__(
        self,
        cfg: ProviderConfig,
        analysis_cfg: AnalysisConfig,
        api_key: str | None,
        log_cfg: LoggingConfig,
        llm_logger: logging.Logger | None = None,
    ):
        if not api_key:
            raise ValueError("Missing Google API key")
        self.cfg = cfg
        self.analysis_cfg = analysis_cfg
        self.api_key = api_key
        self.log_cfg = log_cfg
        self.llm_logger = llm_logger

    def analyze_article(self, text: str, source: str | None = None) -> AnalysisResult:
        prompt = _analysis_prompt(text, self.analysis_cfg)
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.analysis_cfg.temperature,
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        content = ""
        try:
            data = self._post(payload)
            content = _extract_text(data)
            result = _build_result(_parse_json_response(content))
        except httpx.HTTPError as exc:
            self._log_llm_response(source, "provider_error", str(exc), prompt)
            logger.error("Gemini request failed", extra={"error": f"{type(exc).__name__}: {exc}"})
            raise AnalysisFailed(reason=f"provider_error: {type(exc).__name__}") from exc
        except json.JSONDecodeError as exc:
            self._log_llm_response(source, "parse_error", content, prompt)
            logger.error("Gemini response was not valid JSON", extra={"error": str(exc)})
            raise AnalysisFailed(reason="parse_error") from exc
        except ValueError as exc:
            self._log_llm_response(source, "invalid_response", content, prompt)
            logger.error("Gemini response has an invalid structure", extra={"error": str(exc)})
            raise AnalysisFailed(reason=f"invalid_response: {exc}") from exc

        self._log_llm_response(source, "ok", content, prompt)
        result.meta["model"] = self.cfg.model
        return result

    def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.cfg.base_url}/v1beta/models/{self.cfg.model}:generateContent"
        params = {"key": self.api_key}
        with httpx.Client(timeout=self.cfg.timeout_seconds, trust_env=self.cfg.trust_env) as client:
            resp = client.post(url, params=params, json=payload)
            resp.raise_for_status()
            return resp.json()

    def _log_llm_response(self, source: str | None, status: str, content: str, prompt: str) -> None:
        if self.llm_logger is None:
            return
        redaction = self.log_cfg.llm_log_redaction
        payload = {
            "event": "llm_analysis_response",
            "status": status,
            "model": self.cfg.model,
            "source": redact_source(source, redaction),
            "raw_response": truncate_text(redact_text(content, redaction)),
        }
        if self.log_cfg.llm_log_detail == "prompt_response":
            payload["raw_prompt"] = truncate_text(redact_text(prompt, redaction))
        log_event(self.llm_logger, "LLM response", **payload)


def _extract_text(data: dict[str, Any]) -> str:
    """Join the non-thought text parts of the first candidate."""
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    texts = [part.get("text", "") for part in parts if isinstance(part, dict) and not part.get("thought")]
    if not any(texts):
        texts = [part.get("text", "") for part in parts if isinstance(part, dict)]
    return "".join(texts)


def _parse_json_response(content: str) -> dict[str, Any]:
    if not content:
        raise json.JSONDecodeError("Empty content", content or "", 0)
    try:
        obj = json.loads(content)
    except json.JSONDecodeError:
        obj = json.loads(_extract_json_snippet(content))
    if not isinstance(obj, dict):
        raise json.JSONDecodeError("Expected a JSON object", content, 0)
    return obj


def _extract_json_snippet(content: str) -> str:
    fence = _extract_fenced_json(content)
    if fence:
        return fence
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise json.JSONDecodeError("No JSON object found", content, 0)
    return content[start : end + 1]


def _extract_fenced_json(content: str) -> str | None:
    lines = content.splitlines()
    start_idx = None
    for idx, line in enumerate(lines):
        if line.strip().startswith("```") and "json" in line.lower():
            start_idx = idx + 1
            break
    if start_idx is None:
        return None
    for idx in range(start_idx, len(lines)):
        if lines[idx].strip().startswith("```"):
            snippet = "\n".join(lines[start_idx:idx]).strip()
            return snippet or None
    return None


def _build_result(obj: dict[str, Any]) -> AnalysisResult:
    """Validate a decoded response and convert it to an AnalysisResult.

    Raises:
        ValueError: If a required field is missing or has the wrong shape
    """
    summary = obj.get("summary")
    keywords = obj.get("keywords")
    sentiment = obj.get("sentiment")
    reason = obj.get("sentimentReason")

    if not isinstance(summary, str) or not summary.strip():
        raise ValueError("missing summary")
    if not isinstance(keywords, list):
        raise ValueError("keywords is not a list")
    if not isinstance(reason, str) or not reason.strip():
        raise ValueError("missing sentimentReason")
    try:
        parsed_sentiment = Sentiment(sentiment)
    except ValueError:
        raise ValueError(f"unknown sentiment {sentiment!r}") from None

    return AnalysisResult(
        summary=summary.strip(),
        keywords=[str(k).strip() for k in keywords if str(k).strip()],
        sentiment=parsed_sentiment,
        sentiment_reason=reason.strip(),
    )


def _analysis_prompt(text: str, cfg: AnalysisConfig) -> str:
    trimmed = text[: cfg.max_chars]
    return (
        "Analyze the following news article. Extract key information and present it "
        "in a structured JSON format.\n"
        "Provide:\n"
        "1. A concise summary of the article, capturing the main points.\n"
        "2. An array of keywords or hot topics: people, teams, organisations, places "
        "and significant technical terms mentioned.\n"
        "3. The overall sentiment of the article: one of 'Positive', 'Neutral' or 'Negative'.\n"
        "4. A brief, one-sentence explanation for that sentiment.\n"
        "Article text:\n"
        "---\n"
        f"{trimmed}\n"
        "---\n"
        "Respond only with a JSON object with keys summary, keywords, sentiment, sentimentReason."
    )
