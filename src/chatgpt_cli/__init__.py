"""chatgpt-cli: send one prompt to the Chat Completions API and print the reply."""

from chatgpt_cli._client import API_ENDPOINT, ChatClient
from chatgpt_cli._config import DEFAULT_MODEL, Config, load_config, mask_key
from chatgpt_cli._exceptions import (
    APIError,
    ChatError,
    ConfigError,
    DecodeError,
    RequestEncodeError,
    TransportError,
)
from chatgpt_cli._http import HTTPResult, post_json
from chatgpt_cli._types import (
    ChatCompletion,
    ChatMessage,
    ChatRequest,
    Choice,
    Message,
    Usage,
    build_request,
    parse_completion,
)

__all__ = [
    "API_ENDPOINT",
    "DEFAULT_MODEL",
    "APIError",
    "ChatClient",
    "ChatCompletion",
    "ChatError",
    "ChatMessage",
    "ChatRequest",
    "Choice",
    "Config",
    "ConfigError",
    "DecodeError",
    "HTTPResult",
    "Message",
    "RequestEncodeError",
    "TransportError",
    "Usage",
    "build_request",
    "load_config",
    "mask_key",
    "parse_completion",
    "post_json",
]
