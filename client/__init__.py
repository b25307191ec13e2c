# Client package - browser-side controller, state and exports
from .controller import AnalysisController, Submission
from .exports import build_clipboard_payload, build_download_payload, clamp_score
from .forwarding import Forwarder, ForwardingClient, ForwardingError
from .state import ControllerState, Phase, reduce

__all__ = [
    # Controller
    "AnalysisController",
    "Submission",
    # State
    "ControllerState",
    "Phase",
    "reduce",
    # Forwarding
    "Forwarder",
    "ForwardingClient",
    "ForwardingError",
    # Exports
    "build_clipboard_payload",
    "build_download_payload",
    "clamp_score",
]
