"""Extraction of structured data from free-text model replies."""

import json
import logging
import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import EXCERPT_LENGTH, InvalidResponseShapeError, MalformedResponseError


logger = logging.getLogger("glossary_api.extraction")

T = TypeVar("T", bound=BaseModel)

# A whole reply wrapped in a fenced code block, with an optional language tag.
_FENCED_BLOCK = re.compile(r"^```[\w-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)
# Greedy span from the first "{" to the last "}".
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def clean_json_response(text: str) -> str:
    """
    Strip markdown fences and surrounding prose from a model reply.

    Each step leaves the text untouched when it does not match.

    Args:
        text: Raw reply text from the model

    Returns:
        The best candidate for a JSON object span
    """
    cleaned = text.strip()

    fenced = _FENCED_BLOCK.match(cleaned)
    if fenced:
        cleaned = fenced.group(1).strip()

    obj = _JSON_OBJECT.search(cleaned)
    if obj:
        cleaned = obj.group(0)

    return cleaned


def extract_json(text: str, schema: Type[T]) -> T:
    """
    Parse a model reply into a validated payload.

    Args:
        text: Raw reply text from the model
        schema: Pydantic model describing the expected shape

    Returns:
        The validated payload

    Raises:
        MalformedResponseError: If the cleaned text is not valid JSON
        InvalidResponseShapeError: If the parsed value does not match the schema
    """
    cleaned = clean_json_response(text)

    try:
        parsed = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals
        logger.error("JSON parse error: %s", e)
        logger.error("Raw response: %s", text[:EXCERPT_LENGTH])
        logger.error("Cleaned text: %s", cleaned[:EXCERPT_LENGTH])
        raise MalformedResponseError(text, cleaned) from e

    try:
        return schema.model_validate(parsed)
    except ValidationError as e:
        logger.error("Invalid response structure for %s: %s", schema.__name__, parsed)
        raise InvalidResponseShapeError(parsed, e.errors(include_url=False)) from e
