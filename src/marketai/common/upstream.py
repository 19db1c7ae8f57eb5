"""Fixed request envelope for the upstream OpenAI chat-completions API."""
from __future__ import annotations
import os
from typing import Any

from marketai.common.schema import ChatMessage, GenerationError

OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com")
CHAT_COMPLETIONS_PATH = "/v1/chat/completions"

MODEL_ID = "gpt-4o"
MAX_TOKENS = 2000
TEMPERATURE = 0.7


def completions_url(base_url: str | None = None) -> str:
    return f"{(base_url or OPENAI_BASE_URL).rstrip('/')}{CHAT_COMPLETIONS_PATH}"


def auth_headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"}


def build_upstream_payload(messages: list[ChatMessage]) -> dict[str, Any]:
    """
    Build the upstream request body.

    Only `messages` comes from the caller; model, token limit and temperature
    are always the fixed values above.
    """
    return {
        "model": MODEL_ID,
        "messages": [m.model_dump() for m in messages],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


def extract_content(data: Any) -> str:
    """Return the trimmed text of the first completion in a chat-completions response."""
    try:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            raise GenerationError("No content generated from OpenAI API")
        content = choices[0]["message"]["content"]
        if content is None:
            raise GenerationError("No content generated from OpenAI API")
        return str(content).strip()
    except (KeyError, IndexError, TypeError) as e:
        raise GenerationError("No content generated from OpenAI API") from e
