# src/photon_cli/research/formatter.py
"""
Prompt construction and response parsing.

Outbound, the question is wrapped in a system/user prompt pair asking the
model for two sections, ``Summary:`` and ``Key Points:``. Inbound, the raw
model text is segmented back into a FormattedResult.

The parser is a best-effort heuristic tuned to these prompt templates.
It never raises: output it cannot make sense of becomes the summary.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from pydantic import BaseModel, Field

from photon_cli.model_management import Model

logger = logging.getLogger(__name__)

# Reasoning trace markers emitted by thinking models
THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"

# Glyph used for key-point bullets in the rendered view
BULLET = "➤"

# Leading characters stripped from key-point lines
_KEY_POINT_STRIP_CHARS = "0123456789-.*• " + BULLET

# Numbered lines that do not belong in a summary
_NUMBERED_PREFIXES = ("1.", "2.", "3.", "4.", "5.")

_NEWLINE_RUNS = re.compile(r"\n+")


# ── Prompts ──────────────────────────────────────────────────────────────────

SYSTEM_PROMPT = (
    "You are a research assistant that provides structured, factual information. "
    "Format your response with clear sections using exactly these headers: "
    "'Summary:' and 'Key Points:'. "
    "Use emojis sparingly and only where they enhance understanding."
)

THINKING_SYSTEM_PROMPT = (
    SYSTEM_PROMPT
    + " You may reason privately inside "
    + THINK_OPEN
    + "..."
    + THINK_CLOSE
    + " tags before answering. After the closing tag, give only the final "
    "answer using the 'Summary:' and 'Key Points:' headers."
)

_RESPONSE_TEMPLATE = (
    "Summary:\n"
    "[Provide a concise 2-3 sentence summary without numbered points]\n\n"
    "Key Points:\n"
    "1. [First key point]\n"
    "2. [Second key point]\n"
    "3. [Third key point]"
)

USER_PROMPT_SUFFIX = "\n\nPlease structure your response as follows:\n\n" + _RESPONSE_TEMPLATE

THINKING_USER_PROMPT_SUFFIX = (
    "\n\nThink step by step, then structure your final answer as follows:\n\n"
    + _RESPONSE_TEMPLATE
)


class Prompt(BaseModel):
    """A system/user instruction pair for one query."""

    system: str
    user: str

    model_config = {"frozen": True}

    def to_messages(self) -> list[dict[str, str]]:
        """Return the chat-completions ``messages`` list."""
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_prompt(question: str, model: Model | None = None) -> Prompt:
    """
    Build the prompt pair for a question.

    Args:
        question: The user's question, verbatim
        model: Registry model; None (online models) is treated as non-thinking
    """
    if model is not None and model.is_thinking:
        return Prompt(
            system=THINKING_SYSTEM_PROMPT,
            user=question + THINKING_USER_PROMPT_SUFFIX,
        )
    return Prompt(system=SYSTEM_PROMPT, user=question + USER_PROMPT_SUFFIX)


# ── Parsing ──────────────────────────────────────────────────────────────────


class FormattedResult(BaseModel):
    """Summary and key points extracted from one response."""

    summary: str = Field(default="", description="Summary paragraph")
    key_points: tuple[str, ...] = Field(
        default=(), description="Key points in the order they appeared"
    )

    model_config = {"frozen": True}

    @property
    def has_key_points(self) -> bool:
        return len(self.key_points) > 0


class Section(str, Enum):
    """Parser state: which section the current line belongs to."""

    NONE = "none"
    SUMMARY = "summary"
    KEY_POINTS = "keypoints"


def strip_reasoning_trace(text: str) -> str:
    """
    Remove ``<think>...</think>`` spans from a thinking model's output.

    Spans are removed left to right. An opening marker with no closing
    marker after it stops the scan; it and everything after it are kept.
    """
    while True:
        start = text.find(THINK_OPEN)
        if start == -1:
            break
        end = text.find(THINK_CLOSE, start + len(THINK_OPEN))
        if end == -1:
            logger.debug("Unterminated reasoning block left in response")
            break
        text = text[:start] + text[end + len(THINK_CLOSE):]
    return text.strip()


def _detect_header(line: str) -> Section | None:
    lower = line.lower()
    if ":" not in lower:
        return None
    if "summary" in lower:
        return Section.SUMMARY
    if "key point" in lower:
        return Section.KEY_POINTS
    return None


def _clean_key_point(line: str) -> str:
    return line.lstrip(_KEY_POINT_STRIP_CHARS).strip()


def parse_response(text: str) -> FormattedResult:
    """
    Segment raw model text into summary and key points.

    Header lines (containing "summary" or "key point" plus a colon) switch
    sections and are dropped. Lines before any header count as summary.
    If no summary is found, the whole text, newlines collapsed, is used.
    """
    section = Section.NONE
    summary_lines: list[str] = []
    key_points: list[str] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        header = _detect_header(line)
        if header is not None:
            section = header
            continue

        if section is Section.SUMMARY:
            # Models sometimes number their summary; keep those lines out
            if not line.startswith(_NUMBERED_PREFIXES) and BULLET not in line:
                summary_lines.append(line)
        elif section is Section.KEY_POINTS:
            point = _clean_key_point(line)
            if point and not point.lower().startswith("key point"):
                key_points.append(point)
        else:
            summary_lines.append(line)

    summary = " ".join(summary_lines)
    if not summary:
        summary = _NEWLINE_RUNS.sub(" ", text)

    return FormattedResult(summary=summary, key_points=tuple(key_points))


def format_response(text: str, thinking: bool = False) -> FormattedResult:
    """Strip the reasoning trace (thinking models only), then parse."""
    if thinking:
        text = strip_reasoning_trace(text)
    return parse_response(text)


def error_result(error: Exception | str) -> FormattedResult:
    """A result whose summary reports a failed request."""
    return FormattedResult(summary=f"Error fetching research: {error}")
