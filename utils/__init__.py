# Utils package - Utility modules organized by domain
# Import from subpackages for convenience

from .clients.anthropic import UpstreamError, get_text_generator
from .parsing.json import InvalidFormatError, parse_analysis_result, sanitize_model_output
from .validation.url import InvalidURLError, normalize_url

__all__ = [
    "UpstreamError",
    "get_text_generator",
    "InvalidFormatError",
    "parse_analysis_result",
    "sanitize_model_output",
    "InvalidURLError",
    "normalize_url",
]
