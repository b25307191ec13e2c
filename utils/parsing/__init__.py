# Parsing subpackage - model output sanitization and parsing
from .json import (
    InvalidFormatError,
    parse_analysis_result,
    sanitize_model_output,
)

__all__ = [
    "InvalidFormatError",
    "parse_analysis_result",
    "sanitize_model_output",
]
