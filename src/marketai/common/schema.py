"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    """Content categories offered by the generator."""
    SLOGAN = "slogan"
    AD_COPY = "ad-copy"
    PRODUCT_DESCRIPTION = "product-description"
    HASHTAGS = "hashtags"
    EMAIL = "email"


class GenerationError(RuntimeError):
    """Generation failed; the message is meant for the user."""


class EmptyDescriptionError(ValueError):
    """Raised when a product description is blank."""

    def __init__(self) -> None:
        super().__init__("Please provide a product description.")


@dataclass(frozen=True)
class GenerationRequest:
    """One user request: a category and a product description."""
    category: str
    description: str

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise EmptyDescriptionError()


class ChatMessage(BaseModel):
    """One chat message. Fields beyond role/content are kept and forwarded as sent."""
    model_config = ConfigDict(extra="allow")

    role: str
    content: Any


class RelayPayload(BaseModel):
    """Body accepted by POST /api/generate."""
    messages: list[ChatMessage]

    @classmethod
    def for_prompt(cls, prompt: str) -> "RelayPayload":
        return cls(messages=[ChatMessage(role="user", content=prompt)])
