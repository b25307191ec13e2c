# Validation subpackage - user input checks
from .url import InvalidURLError, normalize_url

__all__ = [
    "InvalidURLError",
    "normalize_url",
]
