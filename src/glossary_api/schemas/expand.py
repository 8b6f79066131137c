"""Term expansion API schemas."""

from datetime import datetime
from typing import List, Optional
from pydantic import Field

from ..models.glossary import CamelModel, ExpandedContent, Source


class ExpandRequest(CamelModel):
    """Request model for expanding a single term."""
    term: str
    definition: str
    glossary_title: Optional[str] = None
    seed_word: str
    detected_language: Optional[str] = Field(None, description="Language to write in; English when omitted.")


class ExpandResponse(CamelModel):
    paragraphs: List[str]
    sources: List[Source]
    generated_at: datetime

    @classmethod
    def from_content(cls, content: ExpandedContent) -> "ExpandResponse":
        return cls(
            paragraphs=content.paragraphs,
            sources=content.sources,
            generated_at=content.loaded_at,
        )


class ExpandBatchRequest(CamelModel):
    """Request model for streaming several expansions at once."""
    items: List[ExpandRequest] = Field(..., min_length=1, max_length=20)
