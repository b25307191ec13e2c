from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, confloat

# Strict: "80" and true are not scores; NaN/Infinity are rejected
Score = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]


# Forwarding endpoint models
class GenerateRequest(BaseModel):
    prompt: str = Field(min_length=1)


class GenerateResponse(BaseModel):
    text: str


# Analysis models
class AnalysisResult(BaseModel):
    # The model also returns a "whyThisProjectExists" rationale; it is not displayed
    model_config = ConfigDict(extra="ignore")

    summary: str
    score: Score
    accessibility: Score
    suggestions: List[str]
