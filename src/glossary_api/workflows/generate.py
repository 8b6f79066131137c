"""Glossary generation workflow."""

import logging
import uuid
from typing import List, Optional

from .base import ModelComponent
from ..models.glossary import (
    AdditionalTermsPayload,
    Glossary,
    GlossaryPayload,
    Term,
    TermPayload,
    resolve_language,
)
from ..prompts.glossary import get_additional_terms_prompt, get_generation_prompt
from ..utils.extraction import extract_json
from ..utils.helpers import dedupe_terms, invoke_model, require_text, utcnow


logger = logging.getLogger("glossary_api.generate")


def _to_term(payload: TermPayload) -> Term:
    return Term(
        term=payload.term,
        definition=payload.definition,
        importance=payload.importance,
        related_terms=payload.related_terms,
    )


class GlossaryGenerator(ModelComponent):
    """Builds a glossary from a seed word with a single model call."""

    def build_prompt(self, seed_word: str, title: Optional[str] = None) -> str:
        return get_generation_prompt(seed_word, self.config.term_count, title)

    async def generate(self, seed_word: str, title: Optional[str] = None) -> Glossary:
        """
        Generate a complete glossary.

        Args:
            seed_word: The term the glossary is built around
            title: Optional glossary title, used as domain context

        Returns:
            A new Glossary with a fresh id and timestamps

        Raises:
            InvalidRequestError: If seed_word is missing or blank
            UpstreamProviderError: If the model cannot be built or the call fails
            MalformedResponseError: If the reply is not JSON
            InvalidResponseShapeError: If the reply lacks required fields
        """
        require_text(seed_word, "seedWord")
        title = title or None

        reply = await invoke_model(self.model, self.build_prompt(seed_word, title))
        payload = extract_json(reply, GlossaryPayload)
        language, translations = resolve_language(payload)

        terms, dropped = dedupe_terms(payload.terms)
        if dropped:
            logger.warning("Dropped duplicate terms from glossary for %r: %s", seed_word, dropped)

        now = utcnow()
        glossary = Glossary(
            id=str(uuid.uuid4()),
            title=title,
            description=payload.description,
            seed_word=seed_word,
            detected_language=language,
            translations=translations,
            terms=[_to_term(t) for t in terms],
            created_at=now,
            updated_at=now,
        )
        logger.info("Generated glossary %s with %d terms (%s)", glossary.id, len(glossary.terms), language)
        return glossary

    async def add_terms(self, glossary: Glossary) -> List[Term]:
        """
        Ask the model for more terms that complement an existing glossary.

        The glossary is not modified; names already present are filtered out.

        Returns:
            The new terms, in model order
        """
        existing = glossary.term_names()
        prompt = get_additional_terms_prompt(
            seed_word=glossary.seed_word,
            existing_terms=existing,
            count=self.config.additional_term_count,
            title=glossary.title,
            detected_language=glossary.detected_language,
        )

        reply = await invoke_model(self.model, prompt)
        payload = extract_json(reply, AdditionalTermsPayload)

        terms, dropped = dedupe_terms(payload.terms, existing=existing)
        if dropped:
            logger.warning("Dropped %d repeated terms while growing glossary %s: %s", len(dropped), glossary.id, dropped)
        return [_to_term(t) for t in terms]
