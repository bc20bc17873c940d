"""
Upload router utility functions.

Saves uploaded resumes to a private temp directory and removes them once
the session has been created.

Dependencies: fastapi
System role: Resume upload handling
"""

import logging
import shutil
import tempfile
from pathlib import Path

from fastapi import HTTPException, UploadFile

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf"}
TEMP_PREFIX = "interview_coach_"


async def save_upload_to_temp(upload: UploadFile, max_bytes: int) -> Path:
    """
    Validate and persist an uploaded resume.

    Args:
        upload: Multipart file
        max_bytes: Size limit

    Returns:
        Path: Location of the saved file

    Raises:
        HTTPException(400): Missing filename, wrong type, or too large
    """
    if not upload.filename:
        raise HTTPException(status_code=400, detail="Filename is required")

    file_ext = Path(upload.filename).suffix.lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{file_ext}' not allowed. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
        )

    content = await upload.read()
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB",
        )

    temp_dir = tempfile.mkdtemp(prefix=TEMP_PREFIX)
    temp_path = Path(temp_dir) / f"resume{file_ext}"
    temp_path.write_bytes(content)
    logger.info("Resume saved to temp location", extra={"size": len(content)})
    return temp_path


def cleanup_temp_file(file_path: str | Path) -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()

        if parent_dir.exists() and parent_dir.name.startswith(TEMP_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": str(file_path), "error": str(e)},
        )
