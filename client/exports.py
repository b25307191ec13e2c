import json
from typing import Union

from models import AnalysisResult

Number = Union[int, float]


def clamp_score(value: Number) -> Number:
    """Clamp to [0, 100] for bar widths. The stored value is left alone."""
    return min(max(value, 0), 100)


def build_download_payload(url: str, result: AnalysisResult) -> str:
    """JSON document offered as the "Download JSON" file."""
    return json.dumps({"url": url, "result": result.model_dump()}, indent=2)


def build_clipboard_payload(result: AnalysisResult) -> str:
    """JSON copied by "Copy Summary"."""
    return json.dumps(
        {
            "summary": result.summary,
            "score": result.score,
            "suggestions": result.suggestions,
            "accessibility": result.accessibility,
        },
        indent=2,
    )
