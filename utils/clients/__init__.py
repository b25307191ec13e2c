# Clients subpackage - upstream provider access
from .anthropic import (
    AnthropicGenerator,
    TextGenerator,
    UpstreamError,
    get_text_generator,
)

__all__ = [
    "AnthropicGenerator",
    "TextGenerator",
    "UpstreamError",
    "get_text_generator",
]
