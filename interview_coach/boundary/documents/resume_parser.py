"""
Resume parsing using LangChain PyPDFLoader.

Extracts the plain text of a PDF resume for indexing.

Dependencies: langchain_community.document_loaders, pypdf
System role: Document acquisition (resume)
"""

import asyncio
import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from interview_coach.boundary.documents.text_utils import collapse_whitespace
from interview_coach.core.exceptions import DocumentAcquisitionError, MissingInputError

logger = logging.getLogger(__name__)


def parse_resume_pdf(file_path: str | Path) -> str:
    """
    Parse a PDF resume into normalized plain text.

    Args:
        file_path: Path to the PDF file

    Returns:
        str: Page texts joined with whitespace collapsed

    Raises:
        DocumentAcquisitionError: File missing, not a PDF or unreadable
        MissingInputError: PDF contains no extractable text
    """
    path = Path(file_path)
    if not path.exists():
        raise DocumentAcquisitionError(f"File not found: {path}", source="resume")

    if path.suffix.lower() != ".pdf":
        raise DocumentAcquisitionError(
            f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
            source="resume",
        )

    try:
        pages = PyPDFLoader(str(path)).load()
    except Exception as e:
        raise DocumentAcquisitionError(f"Failed to parse PDF: {e}", source="resume") from e

    text = collapse_whitespace(" ".join(page.page_content for page in pages))
    if not text:
        raise MissingInputError("PDF document contains no extractable text", source="resume")

    logger.info(f"{__name__}:parse_resume_pdf - Extracted {len(text)} characters from {len(pages)} pages")
    return text


async def aparse_resume_pdf(file_path: str | Path) -> str:
    """Run parse_resume_pdf in a worker thread."""
    return await asyncio.to_thread(parse_resume_pdf, file_path)
