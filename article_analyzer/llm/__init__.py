"""LLM-backed article analysis."""

from .providers.base import AnalysisProvider
from .providers.factory import available_providers, create_provider
from .providers.gemini import GeminiProvider

__all__ = [
    "AnalysisProvider",
    "GeminiProvider",
    "available_providers",
    "create_provider",
]
