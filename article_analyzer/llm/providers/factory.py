"""Provider factory and registry for swappable LLM backends."""

from __future__ import annotations

import logging

from ...config import AnalysisConfig, LoggingConfig, ProviderConfig, get_api_key
from .base import AnalysisProvider
from .gemini import GeminiProvider


ProviderBuilder = type[AnalysisProvider]

_PROVIDER_REGISTRY: dict[str, ProviderBuilder] = {
    "gemini": GeminiProvider,
}


def available_providers() -> list[str]:
    """Return the set of registered provider names."""
    return sorted(_PROVIDER_REGISTRY.keys())


def create_provider(
    provider_cfg: ProviderConfig,
    analysis_cfg: AnalysisConfig,
    log_cfg: LoggingConfig,
    llm_logger: logging.Logger | None = None,
) -> AnalysisProvider:
    """Build a provider instance from runtime config."""
    name = provider_cfg.name.lower().strip()
    builder = _PROVIDER_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_providers())
        raise ValueError(f"Unsupported provider: {provider_cfg.name}. Supported: {supported}")
    api_key = get_api_key(provider_cfg)
    return builder(provider_cfg, analysis_cfg, api_key, log_cfg, llm_logger)
