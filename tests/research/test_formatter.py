# tests/research/test_formatter.py
"""Tests for prompt building and response parsing."""

import pytest
from pydantic import ValidationError

from photon_cli.model_management import get_model
from photon_cli.research.formatter import (
    SYSTEM_PROMPT,
    THINK_CLOSE,
    THINK_OPEN,
    FormattedResult,
    build_prompt,
    error_result,
    format_response,
    parse_response,
    strip_reasoning_trace,
)


class TestBuildPrompt:
    def test_default_model_prompt(self):
        prompt = build_prompt("Why is the sky blue?", get_model("deepseek-v3"))
        assert prompt.system == SYSTEM_PROMPT
        assert "'Summary:' and 'Key Points:'" in prompt.system
        assert "emojis sparingly" in prompt.system
        assert THINK_OPEN not in prompt.system
        assert prompt.user.startswith("Why is the sky blue?\n\n")
        assert "2-3 sentence summary without numbered points" in prompt.user
        assert "3. [Third key point]" in prompt.user

    def test_thinking_model_prompt(self):
        prompt = build_prompt("Why?", get_model("deepseek-r1"))
        assert prompt.system.startswith(SYSTEM_PROMPT)
        assert THINK_OPEN in prompt.system and THINK_CLOSE in prompt.system
        assert "Think step by step" in prompt.user
        assert "Summary:" in prompt.user and "Key Points:" in prompt.user

    def test_no_model_is_non_thinking(self):
        assert build_prompt("q", None).system == SYSTEM_PROMPT

    def test_to_messages(self):
        messages = build_prompt("q").to_messages()
        assert [m["role"] for m in messages] == ["system", "user"]
        assert messages[1]["content"].startswith("q")


class TestStripReasoningTrace:
    def test_removes_block(self):
        text = "<think>internal reasoning</think>Summary:\nDone."
        assert strip_reasoning_trace(text) == "Summary:\nDone."

    def test_removes_multiple_blocks(self):
        text = "<think>a</think>Hello <think>b\nc</think> world"
        assert strip_reasoning_trace(text) == "Hello  world"

    def test_trims_whitespace(self):
        assert strip_reasoning_trace("  <think>x</think>\n\nAnswer\n ") == "Answer"

    def test_unterminated_block_passes_through(self):
        text = "<think>no closing tag Summary:\nX"
        assert strip_reasoning_trace(text) == text

    def test_unterminated_after_complete_block(self):
        text = "<think>a</think>Keep <think>dangling"
        assert strip_reasoning_trace(text) == "Keep <think>dangling"

    def test_close_before_open_is_ignored(self):
        assert strip_reasoning_trace("</think>text") == "</think>text"

    def test_no_markers(self):
        assert strip_reasoning_trace("plain") == "plain"


class TestParseResponse:
    def test_structured_response(self):
        text = "Summary:\nThe sky is blue.\n\nKey Points:\n1. Fact one\n2. Fact two"
        result = parse_response(text)
        assert result.summary == "The sky is blue."
        assert result.key_points == ("Fact one", "Fact two")

    def test_plain_answer(self):
        result = parse_response("Just a plain answer with no structure.")
        assert result.summary == "Just a plain answer with no structure."
        assert result.key_points == ()

    def test_headerless_lines_are_joined(self):
        result = parse_response("First line.\n\n  Second line.  \n")
        assert result.summary == "First line. Second line."

    @pytest.mark.parametrize("line", ["1. Point", "- Point", "* Point", "➤ Point", "• Point"])
    def test_bullet_styles_normalize(self, line):
        result = parse_response(f"Summary:\nS.\nKey Points:\n{line}")
        assert result.key_points == ("Point",)

    def test_stripping_is_a_character_class(self):
        result = parse_response("Key Points:\n12.-* ➤ Deep\n3) Paren")
        assert result.key_points == ("Deep", ") Paren")

    def test_summary_spans_lines(self):
        text = "Summary:\nLine one.\nLine two.\n\nKey Points:\n1. A"
        assert parse_response(text).summary == "Line one. Line two."

    def test_numbered_summary_lines_dropped(self):
        text = "Summary:\nIntro.\n1. numbered\n5. five\n6. six\n➤ arrow\nOutro."
        assert parse_response(text).summary == "Intro. 6. six Outro."

    def test_headers_are_case_insensitive_and_discarded(self):
        text = "**SUMMARY:**\nS.\n## KEY POINTS:\n- K"
        result = parse_response(text)
        assert result.summary == "S."
        assert result.key_points == ("K",)

    def test_header_without_colon_is_content(self):
        text = "Summary\nS."
        assert parse_response(text).summary == "Summary S."

    def test_header_line_content_is_discarded(self):
        text = "Summary: inline content\nNext.\nKey Points: inline\n1. P"
        result = parse_response(text)
        assert result.summary == "Next."
        assert result.key_points == ("P",)

    def test_duplicated_key_point_header_skipped(self):
        text = "Key Points:\n1. Key points follow\n2. Real"
        assert parse_response(text).key_points == ("Real",)

    def test_bullet_only_lines_skipped(self):
        assert parse_response("Key Points:\n1.\n-\n2. Real").key_points == ("Real",)

    def test_text_before_header_is_summary(self):
        text = "Preamble.\nSummary:\nS."
        assert parse_response(text).summary == "Preamble. S."

    def test_fallback_when_only_key_points(self):
        text = "Key Points:\n1. A\n\n2. B"
        result = parse_response(text)
        assert result.summary == "Key Points: 1. A 2. B"
        assert result.key_points == ("A", "B")

    def test_fallback_empty_summary_section(self):
        text = "Summary:\n1. only numbered"
        result = parse_response(text)
        assert result.summary == "Summary: 1. only numbered"
        assert result.key_points == ()

    def test_empty_input(self):
        result = parse_response("")
        assert result.summary == ""
        assert result.key_points == ()

    def test_crlf_lines(self):
        text = "Summary:\r\nS.\r\nKey Points:\r\n1. K\r\n"
        result = parse_response(text)
        assert result.summary == "S."
        assert result.key_points == ("K",)

    def test_reparse_is_stable(self):
        first = parse_response(
            "Summary:\nThe sky is blue.\n\nKey Points:\n1. Fact one\n2. Fact two"
        )
        again = parse_response("\n".join([first.summary, *first.key_points]))
        assert again.summary
        assert again.key_points == ()

    def test_result_is_frozen(self):
        result = parse_response("x")
        with pytest.raises(ValidationError):
            result.summary = "y"


class TestFormatResponse:
    def test_thinking_model_response(self):
        text = "<think>internal reasoning</think>Summary:\nDone.\n\nKey Points:\n1. X"
        result = format_response(text, thinking=True)
        assert result.summary == "Done."
        assert result.key_points == ("X",)

    def test_non_thinking_keeps_markup(self):
        text = "<think>r</think>Done."
        assert format_response(text).summary == "<think>r</think>Done."

    def test_error_result(self):
        result = error_result("connection refused")
        assert result == FormattedResult(
            summary="Error fetching research: connection refused"
        )
        assert not result.has_key_points
