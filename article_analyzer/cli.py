"""
Command-line interface for the article analyzer.

Uses Typer to expose three commands:
- extract: print the main text of an article URL
- preview: print the title and snippet of an article URL
- analyze: summary, keywords and sentiment for a URL or a text file

Supports loading .env files for API key configuration.
"""

from __future__ import annotations

import asyncio
from dataclasses import asdict
import json
from pathlib import Path
from typing import Any, NoReturn

from dotenv import load_dotenv
from rich.console import Console
import typer

from .config import AppConfig, load_config
from .core.errors import ArticleAnalyzerError
from .core.types import AnalysisResult, ArticleReport, PreviewMetadata
from .extract.article import extract_article_text
from .extract.preview import extract_preview
from .llm.providers.factory import create_provider
from .logging_utils import setup_llm_logger, setup_logging
from .service import analyze_text, analyze_url, fetch_html

app = typer.Typer(add_completion=False, help="Extract and analyze news articles.")
console = Console()


def _config_option():
    return typer.Option(None, "--config", "-c", exists=True, readable=True, help="YAML config file.")


def _log_level_option():
    return typer.Option(None, "--log-level", help="Logging level.")


def _log_dir_option():
    return typer.Option(None, "--log-dir", help="Directory for log files.")


def _json_option():
    return typer.Option(False, "--json", help="Print machine-readable JSON.")


@app.command()
def extract(
    url: str = typer.Argument(..., help="Article URL."),
    config: Path | None = _config_option(),
    log_level: str | None = _log_level_option(),
    log_dir: Path | None = _log_dir_option(),
    as_json: bool = _json_option(),
):
    """Fetch an article and print its extracted body text."""
    cfg = _load(config, log_level, log_dir)
    try:
        html = fetch_html(url, cfg.fetch)
        text = extract_article_text(html, cfg.extract)
    except ArticleAnalyzerError as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps({"url": url, "text": text}, ensure_ascii=False))
        return
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def preview(
    url: str = typer.Argument(..., help="Article URL."),
    config: Path | None = _config_option(),
    log_level: str | None = _log_level_option(),
    log_dir: Path | None = _log_dir_option(),
    as_json: bool = _json_option(),
):
    """Fetch an article and print its title and snippet."""
    cfg = _load(config, log_level, log_dir)
    try:
        html = fetch_html(url, cfg.fetch)
        card = extract_preview(html, url)
    except ArticleAnalyzerError as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps(asdict(card), ensure_ascii=False))
        return
    _print_preview(card)


@app.command()
def analyze(
    url: str | None = typer.Argument(None, help="Article URL."),
    text_file: Path | None = typer.Option(
        None, "--text-file", "-t", exists=True, readable=True, help="Analyze pasted text from a file."
    ),
    config: Path | None = _config_option(),
    log_level: str | None = _log_level_option(),
    log_dir: Path | None = _log_dir_option(),
    as_json: bool = _json_option(),
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        envvar="GOOGLE_API_KEY",
        help="Override provider API key (or set GOOGLE_API_KEY / .env).",
    ),
):
    """Summarize an article and classify its sentiment.

    Exactly one of URL or --text-file must be given. For a URL the
    preview and the text are fetched concurrently; a failed preview does
    not prevent the analysis.
    """
    if (url is None) == (text_file is None):
        console.print("[red]Error:[/red] pass either a URL or --text-file.")
        raise typer.Exit(code=2)

    cfg = _load(config, log_level, log_dir)
    if api_key:
        cfg.provider.api_key = api_key
    try:
        provider = create_provider(
            cfg.provider,
            cfg.analysis,
            cfg.logging,
            setup_llm_logger(cfg.logging, log_dir),
        )
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if text_file is not None:
        try:
            result = analyze_text(text_file.read_text(encoding="utf-8"), provider, source=str(text_file))
        except ValueError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=1)
        except ArticleAnalyzerError as exc:
            _fail(exc)
        report = ArticleReport(url=str(text_file), analysis=result)
    else:
        report = asyncio.run(analyze_url(url, cfg, provider))

    if as_json:
        typer.echo(json.dumps(_report_payload(report), ensure_ascii=False))
    else:
        _print_report(report)
    if report.analysis is None:
        raise typer.Exit(code=1)


def _load(config: Path | None, log_level: str | None, log_dir: Path | None) -> AppConfig:
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if log_dir is not None:
        cfg.logging.file = True
    setup_logging(cfg.logging, log_dir)
    return cfg


def _fail(exc: ArticleAnalyzerError) -> NoReturn:
    console.print(f"[red]Error:[/red] {exc.message}")
    raise typer.Exit(code=1)


def _print_preview(card: PreviewMetadata) -> None:
    console.print(card.title, style="bold", markup=False, highlight=False)
    console.print(card.snippet, markup=False, highlight=False)
    console.print(card.url, style="dim", markup=False, highlight=False)


def _print_analysis(result: AnalysisResult) -> None:
    console.print("[bold]Summary[/bold]")
    console.print(result.summary, markup=False, highlight=False)
    console.print("[bold]Keywords[/bold]")
    console.print(", ".join(result.keywords) or "-", markup=False, highlight=False)
    console.print(f"[bold]Sentiment[/bold]: {result.sentiment.value}")
    console.print(result.sentiment_reason, markup=False, highlight=False)


def _print_report(report: ArticleReport) -> None:
    if report.preview is not None:
        _print_preview(report.preview)
        console.print()
    if report.analysis is not None:
        _print_analysis(report.analysis)
    for stage, message in report.errors.items():
        console.print(f"[red]{stage}:[/red] {message}")


def _report_payload(report: ArticleReport) -> dict[str, Any]:
    analysis = None
    if report.analysis is not None:
        analysis = asdict(report.analysis)
        analysis["sentiment"] = report.analysis.sentiment.value
    return {
        "url": report.url,
        "preview": asdict(report.preview) if report.preview else None,
        "text_length": len(report.text) if report.text else 0,
        "analysis": analysis,
        "errors": report.errors,
    }


if __name__ == "__main__":
    app()
