"""Session controller: owns the current generated content."""
from __future__ import annotations
import logging
from typing import Callable, Protocol

from marketai.common.schema import GenerationError, GenerationRequest
from marketai.common.templates import build_prompt

LOGGER = logging.getLogger("marketai.client.session")

Clipboard = Callable[[str], None]


class Completer(Protocol):
    def complete(self, prompt: str) -> str: ...


class ContentSession:
    """
    Holds the state of one interactive session.

    `current_content` is replaced by every successful generation and is what
    `copy` writes out. Nothing is persisted.
    """

    def __init__(self, client: Completer) -> None:
        self.client = client
        self.current_content = ""
        self.last_request: GenerationRequest | None = None
        self.is_generating = False

    def generate(self, request: GenerationRequest) -> str:
        if self.is_generating:
            raise GenerationError("A generation is already in progress.")
        self.is_generating = True
        try:
            prompt = build_prompt(request.category, request.description)
            content = self.client.complete(prompt)
        finally:
            self.is_generating = False
        self.current_content = content
        self.last_request = request
        LOGGER.info("Generated %d chars for %s", len(content), request.category)
        return content

    def regenerate(self) -> str:
        if self.last_request is None:
            raise GenerationError("Nothing to regenerate yet.")
        return self.generate(self.last_request)

    def copy(self, clipboard: Clipboard) -> None:
        if not self.current_content:
            raise GenerationError("No content to copy!")
        clipboard(self.current_content)
