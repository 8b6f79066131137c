"""Common dependencies for FastAPI routes."""

from fastapi_throttle import RateLimiter

from ..cache import ExpansionCache, get_cache
from ..config import GenerationConfig, get_settings
from ..models.model_router import get_model_router
from ..workflows.base import ModelProvider
from ..workflows.expand import TermExpander
from ..workflows.generate import GlossaryGenerator

settings = get_settings()

# Rate limiter instance for model-backed routes
router_limiter = RateLimiter(times=settings.rate_limit_times, seconds=settings.rate_limit_seconds)


def _model_provider(config: GenerationConfig) -> ModelProvider:
    # Resolved by the component on first use, after request validation
    def provide():
        return get_model_router().get_model(
            config.model_name, temperature=config.temperature, max_tokens=config.max_tokens
        )
    return provide


def get_glossary_generator() -> GlossaryGenerator:
    """Build a generator wired to the configured default model."""
    config = GenerationConfig.for_generation(settings)
    return GlossaryGenerator(config=config, model_provider=_model_provider(config))


def get_term_expander() -> TermExpander:
    """Build an expander wired to the configured default model."""
    config = GenerationConfig.for_expansion(settings)
    return TermExpander(config=config, model_provider=_model_provider(config))


def get_expansion_cache() -> ExpansionCache:
    return get_cache()
