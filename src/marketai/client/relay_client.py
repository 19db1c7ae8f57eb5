"""HTTP client for the relay, with an optional direct path to OpenAI.

Two credential paths are kept apart:
- no api_key: POST to the relay, which attaches its own server-held key
- api_key set: POST straight to OpenAI with that key; the relay never sees it
"""
from __future__ import annotations
import logging
from typing import Any

import httpx

from marketai.common.schema import GenerationError, RelayPayload
from marketai.common.upstream import (
    auth_headers,
    build_upstream_payload,
    completions_url,
    extract_content,
)

LOGGER = logging.getLogger("marketai.client")

DEFAULT_RELAY_URL = "http://localhost:3001"
GENERATE_PATH = "/api/generate"


def _error_message(r: httpx.Response) -> str:
    """Pick a readable message from an error response.

    The relay answers {"error": "..."}; OpenAI answers {"error": {"message": "..."}}.
    """
    try:
        data: Any = r.json()
    except ValueError:
        data = None
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return f"HTTP error! status: {r.status_code}"


class ContentClient:
    def __init__(
        self,
        base_url: str = DEFAULT_RELAY_URL,
        api_key: str | None = None,
        http: httpx.Client | None = None,
        upstream_url: str | None = None,
        timeout: float = 120.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.upstream_url = upstream_url or completions_url()
        self._http = http or httpx.Client(timeout=timeout)

    @property
    def uses_relay(self) -> bool:
        return not self.api_key

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ContentClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def _post(self, payload: RelayPayload) -> httpx.Response:
        if self.uses_relay:
            return self._http.post(
                f"{self.base_url}{GENERATE_PATH}",
                json=payload.model_dump(),
            )
        return self._http.post(
            self.upstream_url,
            headers=auth_headers(self.api_key),
            json=build_upstream_payload(payload.messages),
        )

    def complete(self, prompt: str) -> str:
        """
        Send one user message and return the first generated message.

        Args:
            prompt: Composed prompt text.

        Raises:
            GenerationError: on transport failure, non-2xx status or empty output.
        """
        try:
            r = self._post(RelayPayload.for_prompt(prompt))
            if r.is_error:
                raise GenerationError(_error_message(r))
            return extract_content(r.json())
        except httpx.HTTPError as e:
            LOGGER.error("Request failed: %s", e)
            raise GenerationError(f"Failed to generate content: {e}") from e
        except GenerationError as e:
            LOGGER.error("Generation failed: %s", e)
            raise GenerationError(f"Failed to generate content: {e}") from e
        except ValueError as e:
            LOGGER.error("Malformed response: %s", e)
            raise GenerationError("Failed to generate content: malformed response") from e
