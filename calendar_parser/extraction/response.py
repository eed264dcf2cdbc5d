"""Unwrapping and decoding of Responses API output.

The response envelope differs across API and SDK versions. Each supported
shape is a small strategy; strategies are tried in order and the first
non-empty text wins.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Sequence

from calendar_parser.extraction.errors import InvalidModelJSONError, MissingOutputTextError


class OutputTextStrategy(ABC):
    """Finds the model's text output in one envelope shape."""

    name: str = "base"

    @abstractmethod
    def extract(self, data: Any) -> str | None:
        """Return the output text, or None if this shape does not apply."""


class ConvenienceTextStrategy(OutputTextStrategy):
    """Top-level ``output_text`` convenience field."""

    name = "output_text"

    def extract(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        value = data.get("output_text")
        if isinstance(value, str) and value:
            return value
        return None


class OutputItemsStrategy(OutputTextStrategy):
    """``output[]`` items (reasoning, message, tool...) with typed content blocks."""

    name = "output_items"

    def extract(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        items = data.get("output")
        if not isinstance(items, list):
            return None
        for item in items:
            content = item.get("content") if isinstance(item, dict) else None
            if not isinstance(content, list):
                continue
            for block in content:
                if not isinstance(block, dict) or block.get("type") != "output_text":
                    continue
                text = block.get("text")
                if isinstance(text, str) and text:
                    return text
        return None


DEFAULT_STRATEGIES: tuple[OutputTextStrategy, ...] = (
    ConvenienceTextStrategy(),
    OutputItemsStrategy(),
)


def extract_output_text(
    data: Any,
    strategies: Sequence[OutputTextStrategy] = DEFAULT_STRATEGIES,
) -> str:
    """
    Find the model's output text in a response envelope.

    Args:
        data: Decoded response body.
        strategies: Envelope shapes to try, in order.

    Returns:
        The first non-empty text found.

    Raises:
        MissingOutputTextError: No strategy found any text.
    """
    for strategy in strategies:
        text = strategy.extract(data)
        if text:
            return text
    raise MissingOutputTextError(raw=data)


def decode_events(output_text: str) -> list[Any]:
    """
    Parse the model's JSON output and return its ``events`` array.

    The payload is trusted to match the requested schema; only the JSON
    syntax is checked here.

    Raises:
        InvalidModelJSONError: The text is not valid JSON.
    """
    try:
        parsed = json.loads(output_text)
    except json.JSONDecodeError as exc:
        raise InvalidModelJSONError(output_text) from exc

    if not isinstance(parsed, dict):
        return []
    events = parsed.get("events")
    return events if isinstance(events, list) else []
