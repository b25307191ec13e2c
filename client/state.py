"""
Client state container.

The UI never mutates state directly: it dispatches events and the
controller swaps in whatever reduce() returns. Completions carry the id
of the submission that started them; anything but the latest id is
dropped, so overlapping submissions cannot overwrite each other.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from models import AnalysisResult

INVALID_URL_MESSAGE = "Please enter a valid URL"
UPSTREAM_FAILURE_MESSAGE = "Analysis request failed. Please try again."
INVALID_FORMAT_MESSAGE = "Model returned invalid JSON format."


class Phase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ControllerState:
    phase: Phase = Phase.IDLE
    url: Optional[str] = None
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    loading: bool = False
    request_id: int = 0


# Events
@dataclass(frozen=True)
class ValidationFailed:
    message: str = INVALID_URL_MESSAGE


@dataclass(frozen=True)
class SubmissionStarted:
    request_id: int
    url: str


@dataclass(frozen=True)
class AnalysisSucceeded:
    request_id: int
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    request_id: int
    message: str


Event = Union[ValidationFailed, SubmissionStarted, AnalysisSucceeded, AnalysisFailed]


def is_stale(state: ControllerState, event: Event) -> bool:
    """True for a completion that belongs to an older submission."""
    if isinstance(event, (AnalysisSucceeded, AnalysisFailed)):
        return event.request_id != state.request_id
    return False


def reduce(state: ControllerState, event: Event) -> ControllerState:
    """Return the state that follows `event`. Never mutates `state`."""
    if is_stale(state, event):
        return state

    if isinstance(event, ValidationFailed):
        # No network call happens, so whatever is on screen stays
        return replace(state, error=event.message)

    if isinstance(event, SubmissionStarted):
        if event.request_id <= state.request_id:
            raise ValueError(
                f"Request ids must increase: got {event.request_id} after {state.request_id}"
            )
        return replace(
            state,
            phase=Phase.SUBMITTING,
            url=event.url,
            result=None,
            error=None,
            loading=True,
            request_id=event.request_id,
        )

    if isinstance(event, AnalysisSucceeded):
        return replace(
            state,
            phase=Phase.SUCCESS,
            result=event.result,
            error=None,
            loading=False,
        )

    if isinstance(event, AnalysisFailed):
        return replace(
            state,
            phase=Phase.FAILURE,
            error=event.message,
            loading=False,
        )

    raise TypeError(f"Unknown event: {event!r}")
