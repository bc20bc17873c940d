"""
Interview dialogue.

Exports: QuestionGenerator, GeneratedQuestion
"""

from .question_generator import GeneratedQuestion, QuestionGenerator

__all__ = ["GeneratedQuestion", "QuestionGenerator"]
