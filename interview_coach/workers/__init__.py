"""
Background workers.

In-process task runner for the post-interview analysis.

Dependencies: asyncio
System role: Background task processing
"""

from interview_coach.workers.analysis_runner import AnalysisTaskRunner

__all__ = ["AnalysisTaskRunner"]
