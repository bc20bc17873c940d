"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
Database, model-provider and interview settings each map their own
environment variable prefix.
"""

from interview_coach.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
