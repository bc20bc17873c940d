"""
Transcript analysis.

Exports: AnalysisPipeline, AnalysisResult, SpeechMetrics, TranscriptMessage,
compute_speech_metrics, parse_tone_and_feedback
"""

from .analysis_schemas import AnalysisResult, SpeechMetrics, TranscriptMessage
from .feedback_parser import parse_tone_and_feedback
from .pipeline import AnalysisPipeline
from .speech_metrics import compute_speech_metrics

__all__ = [
    "AnalysisPipeline",
    "AnalysisResult",
    "SpeechMetrics",
    "TranscriptMessage",
    "compute_speech_metrics",
    "parse_tone_and_feedback",
]
