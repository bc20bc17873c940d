"""Supporting adapters."""

from .transcript_adapter import TranscriptAdapter

__all__ = ["TranscriptAdapter"]
