"""Term expansion workflow."""

import logging
from typing import Optional

from .base import ModelComponent
from ..models.glossary import ExpandedContent, ExpansionPayload
from ..prompts.glossary import get_expansion_prompt
from ..utils.extraction import extract_json
from ..utils.helpers import invoke_model, require_text, utcnow


logger = logging.getLogger("glossary_api.expand")


class TermExpander(ModelComponent):
    """Fetches supplementary paragraphs and sources for one term. Holds no cache."""

    def build_prompt(
        self,
        term: str,
        definition: str,
        seed_word: str,
        glossary_title: Optional[str] = None,
        detected_language: Optional[str] = None,
    ) -> str:
        return get_expansion_prompt(term, definition, seed_word, glossary_title, detected_language)

    async def expand(
        self,
        term: str,
        definition: str,
        seed_word: str,
        glossary_title: Optional[str] = None,
        detected_language: Optional[str] = None,
    ) -> ExpandedContent:
        """
        Expand a term with extra paragraphs and cited sources.

        Raises:
            InvalidRequestError: If term, definition or seed_word is missing
            UpstreamProviderError: If the model cannot be built or the call fails
            MalformedResponseError: If the reply is not JSON
            InvalidResponseShapeError: If paragraphs or sources are missing
        """
        require_text(term, "term")
        require_text(definition, "definition")
        require_text(seed_word, "seedWord")

        prompt = self.build_prompt(term, definition, seed_word, glossary_title, detected_language)
        reply = await invoke_model(self.model, prompt)
        payload = extract_json(reply, ExpansionPayload)

        logger.info("Expanded %r: %d paragraphs, %d sources", term, len(payload.paragraphs), len(payload.sources))
        return ExpandedContent(
            paragraphs=payload.paragraphs,
            sources=payload.sources,
            loaded_at=utcnow(),
        )
