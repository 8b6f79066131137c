"""Shared fixtures for the glossary API tests."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from src.glossary_api.api.main import create_app
from src.glossary_api.api.dependencies import (
    router_limiter,
    get_glossary_generator,
    get_term_expander,
    get_expansion_cache,
)
from src.glossary_api.cache import ExpansionCache
from src.glossary_api.config import GenerationConfig
from src.glossary_api.workflows.expand import TermExpander
from src.glossary_api.workflows.generate import GlossaryGenerator


GLOSSARY_REPLY = {
    "description": "Concepts behind functions that solve problems by calling themselves.",
    "detectedLanguage": "English",
    "terms": [
        {
            "term": "Recursion",
            "definition": "A technique where a function calls itself on a smaller input. It expresses divide-and-conquer solutions concisely.",
            "importance": 10,
            "relatedTerms": ["Base Case", "Call Stack"]
        },
        {
            "term": "Base Case",
            "definition": "The terminating condition of a recursive function. It stops further self-calls.",
            "importance": 9,
            "relatedTerms": ["Recursion"]
        },
        {
            "term": "Call Stack",
            "definition": "A LIFO structure holding active function frames. Deep recursion can overflow it.",
            "importance": 8,
            "relatedTerms": ["Recursion", "Stack Overflow"]
        }
    ]
}

EXPANSION_REPLY = {
    "paragraphs": [
        "APIs in REST style expose resources through uniform HTTP methods, letting clients compose operations without knowing server internals.",
        "Versioning, pagination and consistent error bodies are the practical concerns that decide whether an API stays usable as it grows."
    ],
    "sources": [
        {
            "name": "RFC 9110 - HTTP Semantics",
            "url": "https://www.rfc-editor.org/rfc/rfc9110",
            "description": "Defines the HTTP methods REST builds on"
        },
        {
            "name": "Microsoft REST API Guidelines",
            "description": "Conventions for designing consistent REST APIs"
        }
    ]
}


def make_model(reply=None, error=None):
    """A chat model double whose ainvoke returns ``reply`` or raises ``error``."""
    model = MagicMock()
    model.model = "fake-model"
    if error is not None:
        model.ainvoke = AsyncMock(side_effect=error)
    else:
        text = reply if isinstance(reply, str) else json.dumps(reply)
        model.ainvoke = AsyncMock(return_value=AIMessage(content=text))
    return model


@pytest.fixture
def generation_config():
    """Generation parameters with the default term count."""
    return GenerationConfig(model_name="fake-model", term_count=12, additional_term_count=10)


@pytest.fixture
def glossary_model():
    return make_model(GLOSSARY_REPLY)


@pytest.fixture
def expansion_model():
    return make_model(EXPANSION_REPLY)


@pytest.fixture
def generator(glossary_model, generation_config):
    return GlossaryGenerator(glossary_model, generation_config)


@pytest.fixture
def expander(expansion_model, generation_config):
    return TermExpander(expansion_model, generation_config)


@pytest.fixture
def expansion_cache():
    return ExpansionCache()


@pytest.fixture
def app():
    """The application with rate limiting disabled."""
    application = create_app()
    application.dependency_overrides[router_limiter] = lambda: None
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app, generator, expander, expansion_cache):
    """Test client wired to the fake models."""
    app.dependency_overrides[get_glossary_generator] = lambda: generator
    app.dependency_overrides[get_term_expander] = lambda: expander
    app.dependency_overrides[get_expansion_cache] = lambda: expansion_cache
    return TestClient(app)
