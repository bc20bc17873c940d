"""
Tone and feedback parsing.

The model is asked to answer as `TONE###FEEDBACK`. The reply is split on the
first delimiter; a reply without one is unrecognized and both fields fall
back to defaults. A tone longer than a short label is treated as
unrecognized too.

System role: Qualitative half of transcript analysis
"""

FEEDBACK_DELIMITER = "###"
DEFAULT_SENTIMENT = "Neutral"
DEFAULT_FEEDBACK = "Could not generate feedback."
# analysis_reports.sentiment is VARCHAR(100)
MAX_SENTIMENT_LENGTH = 100


def parse_tone_and_feedback(text: str) -> tuple[str, str]:
    """
    Split a model reply into (sentiment, feedback).

    Args:
        text: Raw model reply

    Returns:
        tuple[str, str]: Stripped fields, each replaced by its default when empty or oversized
    """
    if FEEDBACK_DELIMITER not in text:
        return DEFAULT_SENTIMENT, DEFAULT_FEEDBACK

    sentiment, feedback = text.split(FEEDBACK_DELIMITER, 1)
    sentiment = sentiment.strip()
    if not sentiment or len(sentiment) > MAX_SENTIMENT_LENGTH:
        sentiment = DEFAULT_SENTIMENT
    feedback = feedback.strip() or DEFAULT_FEEDBACK
    return sentiment, feedback
