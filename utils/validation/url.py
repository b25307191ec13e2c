"""
URL normalization for user-supplied input.

Users may paste a bare host ("example.com"); those get the https scheme
before parsing. The normalized string is what gets embedded in the prompt.
"""

import re

from pydantic import HttpUrl, TypeAdapter, ValidationError

DEFAULT_SCHEME = "https://"
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

_http_url = TypeAdapter(HttpUrl)


class InvalidURLError(ValueError):
    """Raised when input is not parseable as a URL with or without a scheme"""

    pass


def has_scheme(text: str) -> bool:
    return bool(SCHEME_PATTERN.match(text))


def normalize_url(raw: str) -> str:
    """
    Normalize raw user text into a fully qualified URL string.

    Args:
        raw: Text typed by the user, surrounding whitespace allowed

    Returns:
        Normalized URL, e.g. "example.com" -> "https://example.com/"

    Raises:
        InvalidURLError: If the text is empty or not an http(s) URL
    """
    text = (raw or "").strip()
    if not text:
        raise InvalidURLError("URL is empty")

    candidate = text if has_scheme(text) else DEFAULT_SCHEME + text

    try:
        parsed = _http_url.validate_python(candidate)
    except ValidationError as e:
        raise InvalidURLError(f"Not a valid URL: {text!r}") from e

    return str(parsed)
