"""ChatClient: sends one prompt and returns the decoded completion."""

from __future__ import annotations

import logging

from chatgpt_cli._config import Config
from chatgpt_cli._exceptions import DecodeError
from chatgpt_cli._http import post_json
from chatgpt_cli._types import ChatCompletion, build_request, parse_completion

logger = logging.getLogger(__name__)

API_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class ChatClient:
    """Single-shot Chat Completions client.

    Usage::

        from chatgpt_cli import ChatClient, load_config

        client = ChatClient(load_config())
        print(client.chat("Hello!").text)
    """

    def __init__(
        self,
        config: Config,
        *,
        url: str = API_ENDPOINT,
        timeout: float | None = None,
    ) -> None:
        self._model = config.model
        self._url = url
        self._timeout = timeout
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {config.api_key}",
        }

    @property
    def model(self) -> str:
        return self._model

    def chat(self, prompt: str) -> ChatCompletion:
        """Send ``prompt`` as a single user message.

        The returned completion always has a string ``text``; any other shape
        raises :class:`DecodeError` carrying the raw body.
        """
        body = build_request(self._model, prompt).to_json()
        logger.debug("Requesting completion from %s with model %s", self._url, self._model)
        result = post_json(self._url, self._headers, body, timeout=self._timeout)

        completion = parse_completion(result.body)
        if completion.text is None:
            raise DecodeError("Unexpected response structure", result.body)
        u = completion.usage
        logger.debug(
            "Tokens: in=%d out=%d total=%d", u.input_tokens, u.output_tokens, u.total_tokens
        )
        return completion
