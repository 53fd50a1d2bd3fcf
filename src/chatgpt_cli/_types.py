"""Request and response types for the Chat Completions endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from chatgpt_cli._exceptions import DecodeError, RequestEncodeError

# --- Request ---


@dataclass(frozen=True, slots=True)
class Message:
    """A single role-tagged chat message."""

    role: str
    content: str = ""

    def to_wire(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True, slots=True)
class ChatRequest:
    """Body of one chat completion request.

    ``store`` is always sent as ``true``.
    """

    model: str
    messages: tuple[Message, ...] = ()
    store: bool = field(default=True, init=False)

    def to_payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "store": self.store,
            "messages": [m.to_wire() for m in self.messages],
        }

    def to_json(self) -> bytes:
        """Serialize to UTF-8 JSON bytes."""
        try:
            return json.dumps(self.to_payload(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestEncodeError(f"Error marshaling request body: {exc}") from exc


def build_request(model: str, prompt: str) -> ChatRequest:
    """Build a single-turn request carrying ``prompt`` as the user message."""
    return ChatRequest(model=model, messages=(Message(role="user", content=prompt),))


# --- Response ---


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """The ``message`` object of a choice. ``content`` is None when absent or not a string."""

    role: str = ""
    content: str | None = None


@dataclass(frozen=True, slots=True)
class Choice:
    """One candidate reply."""

    index: int = 0
    message: ChatMessage | None = None
    finish_reason: str = ""


@dataclass(frozen=True, slots=True)
class ChatCompletion:
    """Decoded chat completion. Unmodelled fields are only available in ``raw``."""

    id: str = ""
    model: str = ""
    choices: tuple[Choice, ...] = ()
    usage: Usage = field(default_factory=Usage)
    raw: dict[str, object] = field(default_factory=dict)

    @property
    def text(self) -> str | None:
        """Content of the first choice, or None if the path does not resolve to a string."""
        if not self.choices:
            return None
        message = self.choices[0].message
        if message is None:
            return None
        return message.content


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _parse_message(raw: Any) -> ChatMessage | None:
    if not isinstance(raw, dict):
        return None
    content = raw.get("content")
    return ChatMessage(
        role=_str(raw.get("role")),
        content=content if isinstance(content, str) else None,
    )


def _parse_choice(raw: Any) -> Choice:
    if not isinstance(raw, dict):
        return Choice()
    return Choice(
        index=_int(raw.get("index")),
        message=_parse_message(raw.get("message")),
        finish_reason=_str(raw.get("finish_reason")),
    )


def _parse_usage(raw: Any) -> Usage:
    if not isinstance(raw, dict):
        return Usage()
    return Usage(
        input_tokens=_int(raw.get("prompt_tokens")),
        output_tokens=_int(raw.get("completion_tokens")),
        total_tokens=_int(raw.get("total_tokens")),
    )


def parse_completion(body: str) -> ChatCompletion:
    """Decode a raw response body into a :class:`ChatCompletion`.

    Missing or mistyped fields decode to their defaults; only a body that is
    not a JSON object raises :class:`DecodeError`.
    """
    try:
        raw = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Error unmarshaling response JSON: {exc}", body) from exc
    if not isinstance(raw, dict):
        raise DecodeError("Unexpected response structure", body)

    raw_choices = raw.get("choices")
    choices = raw_choices if isinstance(raw_choices, list) else []
    return ChatCompletion(
        id=_str(raw.get("id")),
        model=_str(raw.get("model")),
        choices=tuple(_parse_choice(c) for c in choices),
        usage=_parse_usage(raw.get("usage")),
        raw=raw,
    )
