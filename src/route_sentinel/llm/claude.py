"""Thin async wrapper around the Anthropic Messages API."""

import logging
import os
from dataclasses import dataclass, field

import anthropic
from anthropic.types import TextBlock

from route_sentinel.data import APICallUsage, Usage
from route_sentinel.errors import ReplyParseError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


@dataclass(frozen=True)
class Completion:
    """Text generated by one model call, with its usage."""

    text: str
    usage: Usage = field(default_factory=Usage)


class ClaudeCompleter:
    """Send role-tagged turns to Claude and return the generated text.

    One instance is constructed at startup and shared by every component
    that talks to the model. Tests substitute ``complete`` or the underlying
    client's ``messages.create``.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to ANTHROPIC_API_KEY env var). A missing
            key does not fail here; the first call fails instead.
        client: Pre-built async client, mainly for tests.
    """

    def __init__(
        self,
        *,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        self._model = model
        if client is None:
            resolved_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
            client = anthropic.AsyncAnthropic(api_key=resolved_key)
        self._client = client

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, messages: list[dict[str, str]], *, max_tokens: int) -> Completion:
        """Run one completion over an ordered list of turns.

        Args:
            messages: Turns as ``{"role": ..., "content": ...}`` dicts.
            max_tokens: Upper bound on generated tokens.

        Returns:
            The reply text and the usage of this call.

        Raises:
            ReplyParseError: If the reply does not start with a text block.
        """
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=max_tokens,
            messages=messages,  # type: ignore[arg-type]
        )

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    cache_creation_input_tokens=getattr(
                        response.usage, "cache_creation_input_tokens", 0
                    )
                    or 0,
                    cache_read_input_tokens=getattr(response.usage, "cache_read_input_tokens", 0)
                    or 0,
                ),
            ],
        )
        logger.debug(
            "Claude call: %d input tokens, %d output tokens",
            usage.input_tokens,
            usage.output_tokens,
        )

        if not response.content:
            raise ReplyParseError("Model returned an empty reply")
        content_block = response.content[0]
        if not isinstance(content_block, TextBlock):
            raise ReplyParseError(f"Expected TextBlock, got {type(content_block).__name__}")
        return Completion(text=content_block.text, usage=usage)
