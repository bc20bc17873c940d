"""
Pace and clarity metrics.

Pace assumes each candidate message took 0.75 minutes to say, with a floor
of one minute for the whole interview. Clarity subtracts 500 points per
filler word per word spoken, floored at 0.

Dependencies: re, math
System role: Quantitative half of transcript analysis
"""

import math
import re

from interview_coach.core.analysis.analysis_schemas import SpeechMetrics

FILLER_WORDS = re.compile(r"\b(um|uh|er|ah|like|okay|right|so|you know)\b", re.IGNORECASE)
MINUTES_PER_MESSAGE = 0.75
FILLER_PENALTY = 500


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    return int(math.floor(value + 0.5))


def count_words(text: str) -> int:
    return len(text.split())


def count_fillers(text: str) -> int:
    return len(FILLER_WORDS.findall(text))


def compute_speech_metrics(user_messages: list[str]) -> SpeechMetrics:
    """
    Compute pace and clarity over the candidate's messages.

    Args:
        user_messages: Texts of the user-authored messages, in order

    Returns:
        SpeechMetrics: pace 0 and clarity 100 when there are no messages
    """
    if not user_messages:
        return SpeechMetrics(pace=0, clarity_score=100, word_count=0, filler_count=0)

    full_text = " ".join(user_messages)
    word_count = count_words(full_text)
    filler_count = count_fillers(full_text)

    duration_minutes = max(1.0, len(user_messages) * MINUTES_PER_MESSAGE)
    pace = round_half_up(word_count / duration_minutes)

    if word_count == 0:
        clarity = 100
    else:
        clarity = round_half_up(max(0.0, 100 - (filler_count / word_count) * FILLER_PENALTY))

    return SpeechMetrics(
        pace=pace,
        clarity_score=clarity,
        word_count=word_count,
        filler_count=filler_count,
    )
