"""Prompts for glossary generation, term expansion and glossary growth."""

from typing import Dict, List, Optional

from ..models.glossary import DEFAULT_LANGUAGE, DEFAULT_TRANSLATIONS


GLOSSARY_GENERATION_PROMPT = """You are a technical glossary expert. Generate a comprehensive glossary based on the seed word: "{seed_word}".

{domain_context}

Create a glossary with:
1. A brief description (2-3 sentences) explaining what this glossary covers
2. Exactly {term_count} terms: "{seed_word}" first, followed by {additional_count} related terms

## Term Selection Rules
- The seed word MUST be the first term with importance 10
- Include foundational "atoms" (smallest building blocks of the concept)
- Before including a specialized variant, ensure its parent category exists
- Prefer canonical/historical terms over informal names
- Balance: {foundational} foundational (9-10), {core} core (7-8), {applied} applied (5-7)

## Definition Rules
- Sentence 1: WHAT it is (category + key characteristic)
- Sentence 2: WHY it matters or HOW it's used
- Never use the term in its own definition
- Be specific - avoid "various", "different", "many"
- Maximum 50 words per definition
- Write acronyms in UPPER CASE and expand them in the first sentence of their definition

## Importance Calibration
- 10: The seed word itself
- 9: Absolute prerequisites (cannot understand topic without)
- 8: Core domain concepts
- 7: Important supporting concepts
- 6-5: Specialized/advanced topics

## Consistency Rules
- All relatedTerms MUST reference terms that exist in this glossary
- Relationships should be bidirectional where logical

## Language Rules
- Detect the natural language of the seed word{title_clause}
- Write the description and every definition in that language
- Report the language name in English in "detectedLanguage" (e.g. "English", "Portuguese")
- Translate each value of this label table into that language and return it as "translations", keeping the keys unchanged:
{translation_table}

Example of a well-structured term:
{{
  "term": "Gradient Descent",
  "definition": "An optimization algorithm that iteratively adjusts parameters by moving in the direction of steepest decrease of a loss function. It forms the foundation of how neural networks learn from training data.",
  "importance": 8,
  "relatedTerms": ["Loss Function", "Backpropagation", "Learning Rate"]
}}

Return ONLY valid JSON in this exact format:
{{
  "description": "Brief description of the glossary",
  "detectedLanguage": "English",
  "translations": {{"glossary": "Glossary"}},
  "terms": [
    {{
      "term": "Term Name",
      "definition": "Clear definition following the rules above",
      "importance": 8,
      "relatedTerms": ["Related Term 1", "Related Term 2"]
    }}
  ]
}}"""


ADDITIONAL_TERMS_PROMPT = """You are a technical glossary expert. I have an existing glossary about "{seed_word}" with these terms already defined:

{existing_terms}

Generate {count} MORE terms related to this glossary that are NOT in the list above. These should be:
- Complementary to the existing terms
- Relevant to the domain of "{seed_word}"
- {domain_line}
- Different from all existing terms (no duplicates!)
{language_line}
For each new term, provide:
- term: The term or concept name (must be unique!)
- definition: A clear, concise definition (1-2 sentences)
- importance: A score from 1-10 indicating importance/fundamentality
- relatedTerms: An array of 2-4 related terms (can reference existing terms or new terms in this batch)

Return ONLY valid JSON in this exact format:
{{
  "terms": [
    {{
      "term": "New Term Name",
      "definition": "Clear definition",
      "importance": 7,
      "relatedTerms": ["Related Term 1", "Related Term 2"]
    }}
  ]
}}"""


TERM_EXPANSION_PROMPT = """You are a technical documentation expert. Provide expanded information for the following term.
{language_section}
TERM: "{term}"
CURRENT DEFINITION: "{definition}"
DOMAIN CONTEXT: {domain_context}

## Your Task
Generate additional context and cite reliable sources for this term.{language_suffix}

## Content Requirements
1. Write 1-3 paragraphs (each 40-80 words) that:
   - Expand on practical applications or use cases
   - Explain common patterns or best practices
   - Clarify nuances or edge cases
   - Do NOT repeat the definition

2. Cite 1-3 reliable sources from these categories ONLY:
   - Official documentation (language/framework docs)
   - MDN Web Docs (for web technologies)
   - W3C specifications
   - RFCs and official standards
   - Reputable publisher documentation (e.g., Oracle, Microsoft, Google)

## CRITICAL URL Rules
- NEVER include Wikipedia links
- Only include a URL if you are HIGHLY confident it exists and is stable
- If unsure about a URL, provide ONLY the source name without a URL
- Prefer documentation paths that are unlikely to change (e.g., "/docs/concepts/" over dated blog posts)
- When citing official docs, use the most stable/canonical URL format

## Response Format
Return ONLY valid JSON:
{{
  "paragraphs": [
    "First paragraph of expanded context...",
    "Second paragraph with practical details..."
  ],
  "sources": [
    {{
      "name": "Python Official Documentation - Functions",
      "url": "https://docs.python.org/3/tutorial/controlflow.html#defining-functions",
      "description": "Official tutorial on defining and using functions"
    }},
    {{
      "name": "Real Python Advanced Guide",
      "description": "Covers advanced function patterns and decorators"
    }}
  ]
}}

Note: The second source example shows a citation WITHOUT a URL - use this format when you cannot guarantee URL validity."""


def importance_distribution(term_count: int) -> Dict[str, str]:
    """Target tier sizes for a glossary of ``term_count`` terms."""
    def span(share: float) -> str:
        low = max(1, int(term_count * share + 0.5))
        return f"{low}-{low + 1}"

    return {
        "foundational": span(0.25),
        "core": span(0.35),
        "applied": span(0.25),
    }


def is_default_language(language: Optional[str]) -> bool:
    return not language or language.strip().lower() == DEFAULT_LANGUAGE.lower()


def get_generation_prompt(seed_word: str, term_count: int, title: Optional[str] = None) -> str:
    """
    Build the glossary generation prompt.

    Args:
        seed_word: The term the glossary is built around
        term_count: Total number of terms, the seed word included
        title: Optional glossary title used as domain context

    Returns:
        The formatted prompt
    """
    if title:
        domain_context = f'The glossary is titled "{title}", so focus on terms relevant to this domain.'
        title_clause = " and title"
    else:
        domain_context = "Focus on technical and development-related terms."
        title_clause = ""

    translation_table = "\n".join(
        f'  - "{key}": "{value}"' for key, value in DEFAULT_TRANSLATIONS.items()
    )

    return GLOSSARY_GENERATION_PROMPT.format(
        seed_word=seed_word,
        domain_context=domain_context,
        term_count=term_count,
        additional_count=max(term_count - 1, 0),
        title_clause=title_clause,
        translation_table=translation_table,
        **importance_distribution(term_count),
    )


def get_additional_terms_prompt(
    seed_word: str,
    existing_terms: List[str],
    count: int,
    title: Optional[str] = None,
    detected_language: Optional[str] = None,
) -> str:
    """Build the prompt asking for more terms that complement an existing glossary."""
    domain_line = f'Aligned with the "{title}" context' if title else "Technical/development focused"
    language_line = ""
    if not is_default_language(detected_language):
        language_line = f"- Written entirely in {detected_language}\n"

    return ADDITIONAL_TERMS_PROMPT.format(
        seed_word=seed_word,
        existing_terms=", ".join(existing_terms),
        count=count,
        domain_line=domain_line,
        language_line=language_line,
    )


def get_expansion_prompt(
    term: str,
    definition: str,
    seed_word: str,
    glossary_title: Optional[str] = None,
    detected_language: Optional[str] = None,
) -> str:
    """Build the prompt asking for paragraphs and sources about one term."""
    if glossary_title:
        domain_context = f'This term is part of a "{glossary_title}" glossary about "{seed_word}".'
    else:
        domain_context = f'This term is part of a technical glossary about "{seed_word}".'

    language_section = ""
    language_suffix = ""
    if not is_default_language(detected_language):
        language_section = (
            "\n## Language Requirement\n"
            f"Generate all paragraphs and source descriptions in {detected_language}. "
            'Source names (like "Python Documentation") may remain in their original language if they are proper nouns.\n'
        )
        language_suffix = f" Write all content in {detected_language}."

    return TERM_EXPANSION_PROMPT.format(
        language_section=language_section,
        term=term,
        definition=definition,
        domain_context=domain_context,
        language_suffix=language_suffix,
    )
