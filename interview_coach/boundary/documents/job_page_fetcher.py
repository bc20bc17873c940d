"""
Job description fetching.

Downloads a job posting page and extracts its description text. LinkedIn
postings keep the description in `.show-more-less-html__markup`; any other
page falls back to the text of `<body>`.

Dependencies: httpx, bs4
System role: Document acquisition (job description)
"""

import logging

import httpx
from bs4 import BeautifulSoup

from interview_coach.boundary.documents.text_utils import collapse_whitespace
from interview_coach.core.exceptions import DocumentAcquisitionError, MissingInputError

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
}
DESCRIPTION_SELECTOR = ".show-more-less-html__markup"


def extract_job_description(html: str) -> str:
    """
    Extract job description text from an HTML page.

    Returns:
        str: Normalized description text (may be empty)
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    markup = soup.select_one(DESCRIPTION_SELECTOR)
    if markup is not None:
        text = collapse_whitespace(markup.get_text(separator=" "))
        if text:
            return text

    body = soup.body or soup
    return collapse_whitespace(body.get_text(separator=" "))


async def fetch_job_description(
    url: str,
    timeout: float = 15.0,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Fetch a job posting and return its description text.

    Args:
        url: Job posting URL
        timeout: Request timeout in seconds
        client: Optional shared client (a private one is created otherwise)

    Raises:
        DocumentAcquisitionError: Transport failure or non-success status
        MissingInputError: Page yielded no text
    """
    try:
        if client is not None:
            response = await client.get(url, headers=BROWSER_HEADERS, timeout=timeout)
        else:
            async with httpx.AsyncClient(follow_redirects=True) as own_client:
                response = await own_client.get(url, headers=BROWSER_HEADERS, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning(f"{__name__}:fetch_job_description - {url} returned {e.response.status_code}")
        raise DocumentAcquisitionError(
            "Could not retrieve job description from the provided URL.",
            source="job_description",
            details={"url": url, "status_code": e.response.status_code},
        ) from e
    except httpx.HTTPError as e:
        logger.warning(f"{__name__}:fetch_job_description - {url} failed: {type(e).__name__}: {e}")
        raise DocumentAcquisitionError(
            "Could not retrieve job description from the provided URL.",
            source="job_description",
            details={"url": url, "error": str(e)},
        ) from e

    text = extract_job_description(response.text)
    if not text:
        raise MissingInputError("Job posting page contains no text", source="job_description")

    logger.info(f"{__name__}:fetch_job_description - Extracted {len(text)} characters")
    return text
