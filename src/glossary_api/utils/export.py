"""Markdown export of glossaries."""

import re
from typing import Dict, List

from ..models.glossary import DEFAULT_TRANSLATIONS, Glossary, Term


def _labels(glossary: Glossary) -> Dict[str, str]:
    return {**DEFAULT_TRANSLATIONS, **(glossary.translations or {})}


def _term_section(index: int, term: Term, labels: Dict[str, str]) -> List[str]:
    lines = [
        f"## {index}. {term.term}",
        "",
        f"**{labels['definition']}:** {term.definition}",
        "",
        f"**{labels['importance']}:** {term.importance}/10",
        "",
    ]
    if term.related_terms:
        lines += [f"**{labels['relatedTerms']}:** {', '.join(term.related_terms)}", ""]

    content = term.expanded_content
    if content is not None:
        lines += [f"### {labels['learnMore']}", ""]
        for paragraph in content.paragraphs:
            lines += [paragraph, ""]
        if content.sources:
            lines += [f"**{labels['sources']}:**", ""]
            for source in content.sources:
                entry = f"[{source.name}]({source.url})" if source.url else source.name
                if source.description:
                    entry += f" - {source.description}"
                lines.append(f"- {entry}")
            lines.append("")

    lines += ["---", ""]
    return lines


def glossary_to_markdown(glossary: Glossary) -> str:
    """
    Render a glossary, including any expanded content, as Markdown.

    Labels come from the glossary's translation table so exports follow
    the glossary's language.
    """
    labels = _labels(glossary)
    lines = [f"# {glossary.title or labels['glossary']}", ""]

    if glossary.description:
        lines += [glossary.description, ""]

    lines += [
        f"**{labels['seedWord']}:** {glossary.seed_word}",
        "",
        f"**{labels['totalTerms']}:** {len(glossary.terms)}",
        "",
        "---",
        "",
    ]

    for index, term in enumerate(glossary.terms, 1):
        lines += _term_section(index, term, labels)

    return "\n".join(lines)


def export_filename(glossary: Glossary, extension: str = "md") -> str:
    """Download name such as ``machine-learning-2026-02-07.md``."""
    base = glossary.title or "glossary"
    slug = re.sub(r"[^A-Za-z0-9_\-]+", "-", base.strip()).strip("-").lower() or "glossary"
    return f"{slug}-{glossary.updated_at.date().isoformat()}.{extension}"
