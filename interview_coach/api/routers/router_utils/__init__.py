"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from interview_coach.api.routers.router_utils.error_mapping import status_for, to_http_exception
from interview_coach.api.routers.router_utils.upload_utils import (
    cleanup_temp_file,
    save_upload_to_temp,
)

__all__ = [
    "cleanup_temp_file",
    "save_upload_to_temp",
    "status_for",
    "to_http_exception",
]
