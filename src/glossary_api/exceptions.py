"""Error taxonomy for glossary generation and term expansion."""

from typing import Any, List, Optional


EXCERPT_LENGTH = 500


class GlossaryServiceError(Exception):
    """Base class for all errors surfaced by the glossary workflows."""

    status_code = 500


class InvalidRequestError(GlossaryServiceError):
    """Caller input is missing or has the wrong type. No model call was made."""

    status_code = 400


class UpstreamProviderError(GlossaryServiceError):
    """The model provider rejected or failed the call."""

    def __init__(self, message: str):
        super().__init__(f"Model API Error: {message}")


class MalformedResponseError(GlossaryServiceError):
    """The model reply could not be parsed as JSON, even after cleanup."""

    def __init__(self, raw_text: str, cleaned_text: str):
        super().__init__("Failed to parse model API response as JSON")
        self.raw_excerpt = raw_text[:EXCERPT_LENGTH]
        self.cleaned_excerpt = cleaned_text[:EXCERPT_LENGTH]


class InvalidResponseShapeError(GlossaryServiceError):
    """The model reply parsed as JSON but lacks required fields."""

    def __init__(self, parsed: Any, errors: Optional[List[dict]] = None):
        super().__init__("Invalid response structure from model API")
        self.parsed = parsed
        self.errors = errors or []
