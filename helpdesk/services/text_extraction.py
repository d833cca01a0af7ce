import re
from typing import List, Optional

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_PATTERN = re.compile(r"https?://[^\s<>\"')\]]+")

# Sentence punctuation that commonly trails a link in model output
_URL_TRAILING = ".,;:!?"


def extract_emails(text: str) -> Optional[List[str]]:
    """Return email-like substrings in order of appearance, or None."""
    if not text:
        return None
    matches = EMAIL_PATTERN.findall(text)
    return matches or None


def extract_urls(text: str) -> Optional[List[str]]:
    """Return URL-like substrings in order of appearance, or None."""
    if not text:
        return None
    matches = [match.rstrip(_URL_TRAILING) for match in URL_PATTERN.findall(text)]
    return matches or None
