"""Glossary API schemas."""

from typing import List, Optional
from pydantic import Field

from ..models.glossary import CamelModel, Glossary, Term


class GenerateRequest(CamelModel):
    """Request model for glossary generation."""
    title: Optional[str] = Field(None, description="Optional glossary title used as domain context.")
    seed_word: str = Field(..., description="The term the glossary is built around.")


class MoreTermsRequest(CamelModel):
    """Request model for growing an existing glossary."""
    glossary: Glossary


class MoreTermsResponse(CamelModel):
    """The newly generated terms and the glossary with them appended."""
    terms: List[Term]
    glossary: Glossary
