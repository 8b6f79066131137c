"""Configuration management for the glossary API."""

from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # API Keys
    anthropic_api_key: Optional[str] = Field(None, env="ANTHROPIC_API_KEY")
    openai_api_key: Optional[str] = Field(None, env="OPENAI_API_KEY")
    gemini_api_key: Optional[str] = Field(None, env="GEMINI_API_KEY")
    
    # API Configuration
    api_host: str = Field("0.0.0.0", env="API_HOST")
    api_port: int = Field(8000, env="API_PORT")
    log_level: str = Field("INFO", env="LOG_LEVEL")
    
    # Generation Configuration
    default_model: str = Field("claude-sonnet-4-20250514", env="DEFAULT_MODEL")
    glossary_term_count: int = Field(12, env="GLOSSARY_TERM_COUNT")
    additional_term_count: int = Field(10, env="ADDITIONAL_TERM_COUNT")
    generation_temperature: float = Field(0.7, env="GENERATION_TEMPERATURE")
    generation_max_tokens: int = Field(4096, env="GENERATION_MAX_TOKENS")
    expansion_max_tokens: int = Field(2048, env="EXPANSION_MAX_TOKENS")
    
    # Rate limiting for model-backed routes
    rate_limit_times: int = Field(5, env="RATE_LIMIT_TIMES")
    rate_limit_seconds: int = Field(30, env="RATE_LIMIT_SECONDS")
    
    expansion_cache_enabled: bool = Field(True, env="EXPANSION_CACHE_ENABLED")
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the application settings."""
    return settings


class GenerationConfig(BaseModel):
    """Per-component model parameters, passed explicitly at construction."""
    model_name: str = "claude-sonnet-4-20250514"
    term_count: int = Field(12, ge=1, description="Total terms per glossary, seed word included.")
    additional_term_count: int = Field(10, ge=1, description="Terms requested when growing a glossary.")
    temperature: float = 0.7
    max_tokens: int = 4096

    @classmethod
    def for_generation(cls, settings: Settings) -> "GenerationConfig":
        return cls(
            model_name=settings.default_model,
            term_count=settings.glossary_term_count,
            additional_term_count=settings.additional_term_count,
            temperature=settings.generation_temperature,
            max_tokens=settings.generation_max_tokens,
        )

    @classmethod
    def for_expansion(cls, settings: Settings) -> "GenerationConfig":
        return cls(
            model_name=settings.default_model,
            temperature=settings.generation_temperature,
            max_tokens=settings.expansion_max_tokens,
        )
