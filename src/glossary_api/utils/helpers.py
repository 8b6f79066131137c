"""Utility functions for the glossary API."""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from datetime import datetime, timezone

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from ..exceptions import InvalidRequestError, UpstreamProviderError


logger = logging.getLogger("glossary_api.helpers")


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def require_text(value: Any, field_name: str) -> str:
    """
    Validate a required string input.

    Args:
        value: The raw input value
        field_name: Name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidRequestError: If the value is missing, not a string, or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(f"{field_name} is required")
    return value


def message_text(content: Union[str, List[Any]]) -> str:
    """
    Flatten chat message content to plain text.

    Some providers return a list of content blocks instead of a string.
    """
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def invoke_model(model: BaseChatModel, prompt: str) -> str:
    """
    Send a single prompt to the model and return the reply text.

    Raises:
        UpstreamProviderError: If the provider call fails or returns no text
    """
    logger.info("Invoking %s (prompt length %d)", getattr(model, "model", type(model).__name__), len(prompt))
    try:
        response = await model.ainvoke([HumanMessage(content=prompt)])
    except Exception as e:
        logger.error("Model call failed: %s", e)
        raise UpstreamProviderError(str(e)) from e

    text = message_text(getattr(response, "content", ""))
    if not text.strip():
        raise UpstreamProviderError("Unexpected response format from model API")
    return text


def dedupe_terms(terms: List[Any], existing: Optional[List[str]] = None) -> Tuple[List[Any], List[str]]:
    """
    Drop terms whose names repeat, ignoring case.

    Args:
        terms: Term-like objects with a ``term`` attribute, in model order
        existing: Names that are already taken

    Returns:
        The kept terms in their original order, and the names that were dropped
    """
    seen = {name.strip().lower() for name in (existing or [])}
    kept, dropped = [], []
    for t in terms:
        key = t.term.strip().lower()
        if key in seen:
            dropped.append(t.term)
            continue
        seen.add(key)
        kept.append(t)
    return kept, dropped


def format_error_response(error: Exception, context: str = "") -> Dict[str, Any]:
    """
    Format an error for API response.

    Args:
        error: The exception that occurred
        context: Additional context about where the error occurred

    Returns:
        Formatted error dictionary
    """
    return {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context,
        "timestamp": utcnow().isoformat()
    }
