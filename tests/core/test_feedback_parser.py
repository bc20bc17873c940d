"""
Test suite for tone/feedback parsing.

System role: Verification of qualitative transcript analysis
"""

import pytest

from interview_coach.core.analysis.feedback_parser import (
    DEFAULT_FEEDBACK,
    DEFAULT_SENTIMENT,
    MAX_SENTIMENT_LENGTH,
    parse_tone_and_feedback,
)


class TestParseToneAndFeedback:
    """Test suite for parse_tone_and_feedback()."""

    def test_well_formed_reply_should_split_and_strip(self) -> None:
        assert parse_tone_and_feedback(" Confident ### Good depth. ") == ("Confident", "Good depth.")

    def test_reply_without_delimiter_should_use_defaults(self) -> None:
        assert parse_tone_and_feedback("Great job overall") == (DEFAULT_SENTIMENT, DEFAULT_FEEDBACK)

    def test_only_first_delimiter_should_split(self) -> None:
        assert parse_tone_and_feedback("Calm###Use ### sparingly") == ("Calm", "Use ### sparingly")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("###Feedback only", (DEFAULT_SENTIMENT, "Feedback only")),
            ("Nervous###", ("Nervous", DEFAULT_FEEDBACK)),
            ("   ###   ", (DEFAULT_SENTIMENT, DEFAULT_FEEDBACK)),
        ],
    )
    def test_empty_side_should_fall_back(self, text: str, expected: tuple[str, str]) -> None:
        assert parse_tone_and_feedback(text) == expected

    def test_oversized_tone_should_fall_back_and_keep_feedback(self) -> None:
        # Arrange
        tone = (
            "Confident, though hesitant when discussing distributed caching trade-offs "
            "and noticeably rushed through the system design portion"
        )

        # Act
        sentiment, feedback = parse_tone_and_feedback(f"{tone}###Slow down on design questions.")

        # Assert
        assert len(tone) > MAX_SENTIMENT_LENGTH
        assert sentiment == DEFAULT_SENTIMENT
        assert feedback == "Slow down on design questions."

    def test_tone_at_length_limit_should_be_kept(self) -> None:
        tone = "a" * MAX_SENTIMENT_LENGTH

        assert parse_tone_and_feedback(f"{tone}###Ok.") == (tone, "Ok.")
