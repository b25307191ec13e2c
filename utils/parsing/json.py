import json
import logging
import re

import json5
from pydantic import ValidationError

from models import AnalysisResult

logger = logging.getLogger(__name__)

# ```json, ```python, ... and bare ```
FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+-]*")


class InvalidFormatError(ValueError):
    """Raised when model output cannot be turned into an AnalysisResult"""

    pass


def sanitize_model_output(response_text: str) -> str:
    """Strip every code fence marker (with or without language tag) and trim whitespace."""
    return FENCE_PATTERN.sub("", response_text).strip()


def _load_json(text: str):
    """
    Two-layer JSON loading.

    1. Standard json.loads()
    2. json5 parser (tolerates trailing commas and comments)

    Raises:
        InvalidFormatError: If both layers fail
    """
    errors = []

    # Layer 1: Try standard JSON parser first
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        errors.append(f"Standard JSON: {str(e)}")
        logger.debug(f"❌ Layer 1 failed: {str(e)}")

    # Layer 2: json5 for the usual model slips
    try:
        result = json5.loads(text)
        logger.info("🔧 Model output needed JSON5 leniency to parse")
        return result
    except Exception as e:
        errors.append(f"JSON5: {str(e)}")
        logger.debug(f"❌ Layer 2 failed: {str(e)}")

    raise InvalidFormatError(
        f"Failed to parse JSON after all attempts. Errors: {'; '.join(errors)}"
    )


def parse_analysis_result(response_text: str) -> AnalysisResult:
    """
    Sanitize and parse raw model output into an AnalysisResult.

    Args:
        response_text: Raw text returned by the forwarding endpoint

    Returns:
        Validated AnalysisResult

    Raises:
        InvalidFormatError: If the text is not JSON, not an object, or is
            missing one of summary/score/accessibility/suggestions
    """
    if not isinstance(response_text, str):
        raise InvalidFormatError(f"Expected text, got {type(response_text).__name__}")

    cleaned = sanitize_model_output(response_text)
    if not cleaned:
        raise InvalidFormatError("Model output is empty")

    data = _load_json(cleaned)
    if not isinstance(data, dict):
        raise InvalidFormatError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        logger.warning(f"⚠️  Model JSON is missing or mistypes fields: {e.error_count()} error(s)")
        raise InvalidFormatError(f"Model JSON does not match the analysis shape: {e}") from e
