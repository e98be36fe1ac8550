# utils.py
import re
from typing import Any, Optional

from .constants import SNIPPET_LENGTH

_ABSOLUTE_URL = re.compile(r'^https?://', re.IGNORECASE)


def normalize_url(raw_url: str) -> str:
    if _ABSOLUTE_URL.match(raw_url):
        return raw_url
    return f'https://{raw_url}'


def truncate_snippet(markup: str, limit: int = SNIPPET_LENGTH) -> str:
    return markup[:limit]


def url_from_payload(payload: Any) -> Optional[str]:
    """Pull the trimmed url out of a decoded request body.

    Returns None when the payload is not a mapping, '' when the url is missing.
    """
    if not isinstance(payload, dict):
        return None
    value = payload.get('url')
    if value is None:
        return ''
    return str(value).strip()
