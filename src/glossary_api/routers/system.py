"""System endpoints: health checks, models, cache management."""

from fastapi import APIRouter
from ..schemas.system import HealthResponse
from ..models.model_router import get_model_router
from ..cache import get_cache

router = APIRouter(prefix="", tags=["System"])

API_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Check API status and available language models."""
    model_router = get_model_router()
    available_models = model_router.get_available_models()
    
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        available_models=available_models
    )


@router.get("/models", summary="Get All Supported Models")
async def get_models():
    """
    Get the models usable with the configured API keys.
    
    Each model includes:
    - provider: The AI provider (Anthropic, OpenAI, Google)
    - description: Model description
    - capabilities: List of model capabilities
    """
    model_router = get_model_router()
    return {"models": model_router.get_available_models()}


@router.post("/system/clear-cache", summary="Clear Server-Side Cache")
async def clear_cache():
    """
    Clears the expanded-term cache, so the next expansion of any term
    fetches fresh content from the language model.
    """
    cache = get_cache()
    cleared_count = cache.clear()
    return {"status": "cache_cleared", "cleared_items": cleared_count}
