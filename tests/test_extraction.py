"""Tests for extracting structured data from model replies."""

import json
import sys

import pytest

from src.glossary_api.exceptions import InvalidResponseShapeError, MalformedResponseError
from src.glossary_api.models.glossary import ExpansionPayload, GlossaryPayload
from src.glossary_api.utils.extraction import clean_json_response, extract_json


PAYLOAD = {"description": "x", "terms": []}
RAW = json.dumps(PAYLOAD)


class TestCleanJsonResponse:
    """Test fence and prose stripping."""

    @pytest.mark.parametrize("wrapped", [
        f"```json\n{RAW}\n```",
        f"```\n{RAW}\n```",
        f"```JSON\n{RAW}\n```",
        f"  ```json\n{RAW}\n```  \n",
        f"```{RAW}```",
    ])
    def test_fenced_block_matches_unwrapped(self, wrapped):
        """Fenced replies clean to the same JSON as the bare object."""
        assert json.loads(clean_json_response(wrapped)) == PAYLOAD

    def test_leading_and_trailing_prose(self):
        """Only the object span survives surrounding prose."""
        text = f"Here is your glossary:\n{RAW}\nLet me know if you need more."
        assert clean_json_response(text) == RAW

    def test_greedy_span_keeps_nested_objects(self):
        text = 'Sure! {"a": {"b": 1}, "c": [{"d": 2}]} done'
        assert clean_json_response(text) == '{"a": {"b": 1}, "c": [{"d": 2}]}'

    def test_text_without_braces_is_only_trimmed(self):
        assert clean_json_response("  no json here  ") == "no json here"


class TestExtractJson:
    """Test parsing and structural validation."""

    def test_fenced_reply_example(self):
        """A fenced reply yields the description and empty term list."""
        payload = extract_json('```json\n{"description":"x","terms":[]}\n```', GlossaryPayload)
        assert payload.description == "x"
        assert payload.terms == []

    def test_malformed_json_raises_typed_error(self):
        text = '{"description": "x", "terms": [}'
        with pytest.raises(MalformedResponseError) as exc_info:
            extract_json(text, GlossaryPayload)
        assert exc_info.value.raw_excerpt == text
        assert exc_info.value.cleaned_excerpt == text

    def test_plain_prose_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            extract_json("I could not produce a glossary.", GlossaryPayload)

    def test_malformed_excerpts_are_truncated(self):
        text = "{" + "x" * 2000 + "}"
        with pytest.raises(MalformedResponseError) as exc_info:
            extract_json(text, GlossaryPayload)
        assert len(exc_info.value.raw_excerpt) == 500
        assert len(exc_info.value.cleaned_excerpt) == 500

    def test_missing_terms_is_shape_error(self):
        with pytest.raises(InvalidResponseShapeError) as exc_info:
            extract_json('{"description": "x"}', GlossaryPayload)
        assert exc_info.value.parsed == {"description": "x"}
        assert exc_info.value.errors

    def test_empty_description_is_shape_error(self):
        with pytest.raises(InvalidResponseShapeError):
            extract_json('{"description": "", "terms": []}', GlossaryPayload)

    def test_term_missing_related_terms_is_shape_error(self):
        reply = {"description": "x", "terms": [{"term": "A", "definition": "d", "importance": 5}]}
        with pytest.raises(InvalidResponseShapeError):
            extract_json(json.dumps(reply), GlossaryPayload)

    def test_importance_bounds_not_enforced(self):
        reply = {"description": "x", "terms": [{"term": "A", "definition": "d", "importance": 42, "relatedTerms": []}]}
        payload = extract_json(json.dumps(reply), GlossaryPayload)
        assert payload.terms[0].importance == 42

    @pytest.mark.parametrize("reply", [
        '{"sources": []}',
        '{"paragraphs": []}',
        '{"paragraphs": "not a list", "sources": []}',
    ])
    def test_expansion_requires_both_arrays(self, reply):
        with pytest.raises(InvalidResponseShapeError):
            extract_json(reply, ExpansionPayload)

    def test_source_requires_name(self):
        with pytest.raises(InvalidResponseShapeError):
            extract_json('{"paragraphs": [], "sources": [{"url": "https://example.com"}]}', ExpansionPayload)

    def test_source_url_optional(self):
        payload = extract_json('{"paragraphs": ["p"], "sources": [{"name": "MDN Web Docs"}]}', ExpansionPayload)
        assert payload.sources[0].name == "MDN Web Docs"
        assert payload.sources[0].url is None

    def test_blank_term_name_is_shape_error(self):
        reply = {"description": "x", "terms": [{"term": "   ", "definition": "d", "importance": 5, "relatedTerms": []}]}
        with pytest.raises(InvalidResponseShapeError):
            extract_json(json.dumps(reply), GlossaryPayload)

    def test_term_name_is_trimmed(self):
        reply = {"description": "x", "terms": [{"term": "  Stack ", "definition": "d", "importance": 5, "relatedTerms": []}]}
        payload = extract_json(json.dumps(reply), GlossaryPayload)
        assert payload.terms[0].term == "Stack"

    def test_blank_source_name_is_shape_error(self):
        with pytest.raises(InvalidResponseShapeError):
            extract_json('{"paragraphs": [], "sources": [{"name": "   "}]}', ExpansionPayload)

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
    def test_oversized_integer_is_malformed(self):
        text = '{"description": "x", "terms": [], "n": ' + "1" * 5000 + "}"
        with pytest.raises(MalformedResponseError):
            extract_json(text, GlossaryPayload)

    def test_deeply_nested_reply_is_malformed(self):
        text = "[" * 100000 + "]" * 100000
        with pytest.raises(MalformedResponseError) as exc_info:
            extract_json(text, GlossaryPayload)
        assert len(exc_info.value.raw_excerpt) == 500
