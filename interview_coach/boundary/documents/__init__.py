"""
Document acquisition collaborators.

Exports: parse_resume_pdf, aparse_resume_pdf, fetch_job_description, extract_job_description
"""

from .job_page_fetcher import extract_job_description, fetch_job_description
from .resume_parser import aparse_resume_pdf, parse_resume_pdf

__all__ = [
    "aparse_resume_pdf",
    "extract_job_description",
    "fetch_job_description",
    "parse_resume_pdf",
]
