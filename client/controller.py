import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from analysis_prompt import build_analysis_prompt
from client.exports import build_clipboard_payload, build_download_payload
from client.forwarding import Forwarder, ForwardingClient, ForwardingError
from client.state import (
    INVALID_FORMAT_MESSAGE,
    UPSTREAM_FAILURE_MESSAGE,
    AnalysisFailed,
    AnalysisSucceeded,
    ControllerState,
    Event,
    SubmissionStarted,
    ValidationFailed,
    reduce,
)
from utils.parsing.json import InvalidFormatError, parse_analysis_result
from utils.validation.url import InvalidURLError, normalize_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    request_id: int
    url: str
    prompt: str


class AnalysisController:
    """
    Drives one browser session: validate, prompt, forward, parse, store.

    Every failure ends up in `state.error`; nothing raised by the forwarder
    or the parser escapes submit()/complete().
    """

    def __init__(
        self,
        forwarder: Optional[Forwarder] = None,
        state: Optional[ControllerState] = None,
    ):
        self.forwarder = forwarder or ForwardingClient()
        self._state = state or ControllerState()
        self._next_request_id = self._state.request_id
        self._listeners: List[Callable[[ControllerState], None]] = []

    @property
    def state(self) -> ControllerState:
        return self._state

    def subscribe(self, listener: Callable[[ControllerState], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: Event) -> ControllerState:
        previous = self._state
        self._state = reduce(previous, event)
        if self._state is previous:
            logger.debug(f"Dropped stale event {type(event).__name__}")
            return self._state
        for listener in self._listeners:
            listener(self._state)
        return self._state

    def begin(self, raw_url: str) -> Optional[Submission]:
        """
        Validate input and open a new submission.

        Returns None (and records a validation error) when the URL is not
        parseable; no network call should follow in that case.
        """
        try:
            url = normalize_url(raw_url)
        except InvalidURLError as e:
            logger.info(f"⚠️  Rejected input: {str(e)}")
            self.dispatch(ValidationFailed())
            return None

        self._next_request_id += 1
        submission = Submission(
            request_id=self._next_request_id,
            url=url,
            prompt=build_analysis_prompt(url),
        )
        self.dispatch(SubmissionStarted(request_id=submission.request_id, url=url))
        logger.info(f"⏳ Analysis #{submission.request_id} started for {url}")
        return submission

    async def complete(self, submission: Submission) -> ControllerState:
        """Run the single awaited call for `submission` and record its outcome."""
        try:
            text = await self.forwarder.forward(submission.prompt)
        except ForwardingError as e:
            logger.error(f"❌ Analysis #{submission.request_id} failed upstream: {str(e)}")
            return self.dispatch(AnalysisFailed(submission.request_id, UPSTREAM_FAILURE_MESSAGE))
        except Exception as e:
            logger.exception(f"❌ Analysis #{submission.request_id} failed: {str(e)}")
            return self.dispatch(AnalysisFailed(submission.request_id, UPSTREAM_FAILURE_MESSAGE))

        try:
            result = parse_analysis_result(text)
        except InvalidFormatError as e:
            logger.error(f"❌ Analysis #{submission.request_id} returned invalid JSON: {str(e)}")
            return self.dispatch(AnalysisFailed(submission.request_id, INVALID_FORMAT_MESSAGE))

        logger.info(f"✅ Analysis #{submission.request_id} completed")
        return self.dispatch(AnalysisSucceeded(submission.request_id, result))

    async def submit(self, raw_url: str) -> ControllerState:
        submission = self.begin(raw_url)
        if submission is None:
            return self._state
        return await self.complete(submission)

    # ======================
    # Export actions
    # ======================

    def download_payload(self) -> Optional[str]:
        if self._state.result is None:
            return None
        return build_download_payload(self._state.url, self._state.result)

    def clipboard_payload(self) -> Optional[str]:
        if self._state.result is None:
            return None
        return build_clipboard_payload(self._state.result)
