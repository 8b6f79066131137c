from datetime import datetime
from typing import Annotated, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


DEFAULT_LANGUAGE = "English"

# Names are trimmed before the emptiness check, so "   " is rejected.
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# UI and export labels used when the model does not supply a localized table.
DEFAULT_TRANSLATIONS: Dict[str, str] = {
    "glossary": "Glossary",
    "seedWord": "Seed Word",
    "totalTerms": "Total Terms",
    "definition": "Definition",
    "importance": "Importance",
    "relatedTerms": "Related Terms",
    "learnMore": "Learn More",
    "sources": "Sources",
}


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Source(CamelModel):
    """A citation attached to an expanded term."""
    name: Name = Field(..., description="Human-readable source name, meaningful without a URL.")
    url: Optional[str] = Field(None, description="Stable URL, omitted when its existence is uncertain.")
    description: Optional[str] = Field(None, description="What the source covers.")


class ExpandedContent(CamelModel):
    """Supplementary paragraphs and sources for a single term."""
    paragraphs: List[str] = Field(default_factory=list)
    sources: List[Source] = Field(default_factory=list)
    loaded_at: datetime


class Term(CamelModel):
    """A single glossary entry."""
    term: str = Field(..., min_length=1, description="Term name, unique within a glossary.")
    definition: str
    importance: int = Field(..., description="Relevance score, nominally 1-10.")
    related_terms: List[str] = Field(default_factory=list, description="Names of other terms, ideally in the same glossary.")
    expanded_content: Optional[ExpandedContent] = None


class Glossary(CamelModel):
    """A generated glossary and its terms, in relevance order."""
    id: str
    title: Optional[str] = None
    description: str
    seed_word: str
    detected_language: Optional[str] = None
    translations: Optional[Dict[str, str]] = None
    terms: List[Term] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    def term_names(self) -> List[str]:
        return [t.term for t in self.terms]


# Structured outputs parsed from the model reply text
class TermPayload(CamelModel):
    term: Name
    definition: str
    importance: int
    related_terms: List[str]


class GlossaryPayload(CamelModel):
    description: str = Field(..., min_length=1)
    terms: List[TermPayload]
    detected_language: Optional[str] = None
    translations: Optional[Dict[str, str]] = None


class AdditionalTermsPayload(CamelModel):
    terms: List[TermPayload]


class ExpansionPayload(CamelModel):
    paragraphs: List[str]
    sources: List[Source]


def resolve_language(payload: GlossaryPayload) -> Tuple[str, Dict[str, str]]:
    """Fill in the language label and translation table the model left out."""
    language = (payload.detected_language or "").strip() or DEFAULT_LANGUAGE
    translations = {**DEFAULT_TRANSLATIONS, **(payload.translations or {})}
    return language, translations
