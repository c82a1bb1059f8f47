"""LLM provider implementations."""

from .base import AnalysisProvider
from .factory import available_providers, create_provider
from .gemini import GeminiProvider

__all__ = ["AnalysisProvider", "GeminiProvider", "available_providers", "create_provider"]
