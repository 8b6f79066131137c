"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.model_router import get_model_router
from ..routers import (
    system,
    glossary,
    expand,
    export,
)

logger = logging.getLogger("glossary_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info("Starting Glossary Builder API...")
    logger.info("Default model: %s, terms per glossary: %d", settings.default_model, settings.glossary_term_count)
    logger.info("Available models: %s", list(get_model_router().get_available_models().keys()))
    if not get_model_router().validate_model_availability(settings.default_model):
        logger.warning("Default model %s has no configured API key; model-backed routes will fail", settings.default_model)
    yield
    # Shutdown
    logger.info("Shutting down Glossary Builder API...")


# Initialize FastAPI app
app = FastAPI(
    title="Glossary Builder API",
    description="""
Builds structured glossaries from a single seed word using a large language model.

**Key Features:**
- Glossary generation: a description plus ranked terms with definitions, importance and related terms.
- Automatic language detection; content and export labels follow the seed word's language.
- Term expansion with practical paragraphs and cited sources, cached per term.
- Concurrent expansion of several terms via Server-Sent Events (SSE).
- Markdown export of a glossary and its expanded content.
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Missing or mistyped request fields are client errors (400)."""
    errors = exc.errors()
    fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in errors]
    missing = ", ".join(f for f in fields if f) or "request body"
    return JSONResponse(
        status_code=400,
        content={"detail": f"Invalid or missing field(s): {missing}", "errors": _summarize_errors(errors)},
    )


def _summarize_errors(errors):
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")} for err in errors]


# Include all routers
app.include_router(system.router)
app.include_router(glossary.router)
app.include_router(expand.router)
app.include_router(export.router)


def create_app() -> FastAPI:
    """Factory function to create the FastAPI app."""
    return app
