"""
Research pipeline: prompt building, transport, and response parsing.
"""

from photon_cli.research.client import OpenRouterClient, build_payload, extract_content
from photon_cli.research.formatter import (
    FormattedResult,
    Prompt,
    build_prompt,
    format_response,
    parse_response,
    strip_reasoning_trace,
)
from photon_cli.research.service import ResearchOutcome, ResearchService, ResearchState

__all__ = [
    "FormattedResult",
    "Prompt",
    "build_prompt",
    "parse_response",
    "strip_reasoning_trace",
    "format_response",
    "OpenRouterClient",
    "build_payload",
    "extract_content",
    "ResearchService",
    "ResearchState",
    "ResearchOutcome",
]
