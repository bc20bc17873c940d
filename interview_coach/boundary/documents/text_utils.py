"""Whitespace normalization shared by the document collaborators."""


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim."""
    return " ".join(text.split())
