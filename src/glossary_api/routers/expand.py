"""Term expansion endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Depends
from sse_starlette.sse import EventSourceResponse

from ..schemas.expand import ExpandRequest, ExpandResponse, ExpandBatchRequest
from ..exceptions import GlossaryServiceError
from ..cache import ExpansionCache
from ..config import get_settings
from ..workflows.expand import TermExpander
from ..workflows.streaming import stream_expansions
from ..api.dependencies import router_limiter, get_term_expander, get_expansion_cache

logger = logging.getLogger("glossary_api.routers.expand")

router = APIRouter(prefix="/api", tags=["Expansion"])
settings = get_settings()


@router.post(
    "/expand",
    response_model=ExpandResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": "Supplementary paragraphs and sources for one term.",
            "content": {
                "application/json": {
                    "example": {
                        "paragraphs": ["REST APIs expose resources through uniform HTTP verbs..."],
                        "sources": [
                            {
                                "name": "RFC 9110 - HTTP Semantics",
                                "url": "https://www.rfc-editor.org/rfc/rfc9110",
                                "description": "Defines the HTTP methods REST builds on"
                            },
                            {"name": "Microsoft REST API Guidelines"}
                        ],
                        "generatedAt": "2026-02-07T10:00:05Z"
                    }
                }
            }
        },
        400: {"description": "term, definition or seedWord missing."},
        500: {"description": "Model API error or unparseable model reply."}
    }
)
async def expand_term(
    request: ExpandRequest,
    expander: TermExpander = Depends(get_term_expander),
    cache: ExpansionCache = Depends(get_expansion_cache),
):
    """
    Expand one term with extra paragraphs and cited sources.

    Identical requests are answered from the server-side cache while it is enabled.
    """
    async def factory():
        return await expander.expand(
            term=request.term,
            definition=request.definition,
            seed_word=request.seed_word,
            glossary_title=request.glossary_title,
            detected_language=request.detected_language,
        )

    try:
        if settings.expansion_cache_enabled:
            key = cache.get_cache_key(request.term, request.definition, request.seed_word, request.detected_language)
            content = await cache.get_or_expand(key, factory)
        else:
            content = await factory()
    except GlossaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception("Error expanding term")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return ExpandResponse.from_content(content)


@router.post("/expand/invalidate", summary="Invalidate One Cached Expansion")
async def invalidate_expansion(
    request: ExpandRequest,
    cache: ExpansionCache = Depends(get_expansion_cache),
):
    """
    Drop the cached expansion for one term, so the next request for it
    fetches fresh content from the language model.
    """
    key = cache.get_cache_key(request.term, request.definition, request.seed_word, request.detected_language)
    removed = cache.invalidate(key)
    logger.info("Invalidate %r: %s", request.term, "removed" if removed else "not cached")
    return {"status": "invalidated" if removed else "not_cached"}


@router.post(
    "/expand/stream",
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": """
A stream of Server-Sent Events (SSE), one per finished expansion.

**Event Type: `expand_item_completed`**
```json
{
  "timestamp": "...",
  "type": "expand_item_completed",
  "status": "completed",
  "index": 0,
  "term": "API",
  "result": {"paragraphs": ["..."], "sources": [{"name": "..."}], "generatedAt": "..."}
}
```

**Event Type: `completion`**
```json
{"timestamp": "...", "type": "completion", "status": "completed", "succeeded": 2, "failed": 0}
```
            """,
            "content": {
                "text/event-stream": {
                    "schema": {"type": "string"}
                }
            }
        }
    }
)
async def stream_expand_terms(
    request: ExpandBatchRequest,
    expander: TermExpander = Depends(get_term_expander),
    cache: ExpansionCache = Depends(get_expansion_cache),
):
    """
    Expand several terms concurrently, streaming each result as it finishes.
    """
    return EventSourceResponse(
        stream_expansions(
            expander,
            request.items,
            cache=cache if settings.expansion_cache_enabled else None,
        ),
        media_type="text/event-stream"
    )
