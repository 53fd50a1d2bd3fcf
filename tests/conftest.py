"""Shared test fixtures."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from chatgpt_cli._config import API_KEY_ENV, MODEL_ENV

CHAT_RESPONSE: dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "model": "gpt-4o-mini-2024-07-18",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "hello"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
}


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json."""

    def __init__(
        self,
        json_data: dict[str, Any] | None = None,
        status_code: int = 200,
        text: str = "",
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.text = json.dumps(json_data) if json_data is not None else text
        self.closed = False

    def __enter__(self) -> MockResponse:
        return self

    def __exit__(self, *args: object) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Run each test in an empty directory with no OpenAI variables set.

    ``load_dotenv`` writes straight into ``os.environ``, so the whole mapping
    is restored afterwards.
    """
    with patch.dict(os.environ):
        os.environ.pop(API_KEY_ENV, None)
        os.environ.pop(MODEL_ENV, None)
        monkeypatch.chdir(tmp_path)
        yield tmp_path


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


def sent_payload(mock_post: MagicMock) -> dict[str, Any]:
    """Decode the JSON body passed to the mocked ``requests.post``."""
    return json.loads(mock_post.call_args.kwargs["data"])
