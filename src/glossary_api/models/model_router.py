"""Dynamic model routing system for the glossary API."""

from typing import Dict, Any
from enum import Enum

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.language_models import BaseChatModel

from ..config import get_settings


class SupportedModel(Enum):
    """Enumeration of supported models."""
    # Anthropic - use exact model IDs
    CLAUDE_SONNET_4_20250514 = "claude-sonnet-4-20250514"
    CLAUDE_SONNET_4_5_20250929 = "claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_4_5_20251001 = "claude-haiku-4-5-20251001"
    CLAUDE_3_HAIKU_20240307 = "claude-3-haiku-20240307"
    # OpenAI
    GPT4O = "gpt-4o"
    GPT4O_MINI = "gpt-4o-mini"
    # Google
    GEMINI_2_5_PRO = "gemini-2.5-pro"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"


ANTHROPIC_MODELS = {
    SupportedModel.CLAUDE_SONNET_4_20250514.value: "Claude Sonnet 4.0 (2025-05-14)",
    SupportedModel.CLAUDE_SONNET_4_5_20250929.value: "Claude Sonnet 4.5 (2025-09-29)",
    SupportedModel.CLAUDE_HAIKU_4_5_20251001.value: "Claude Haiku 4.5 (2025-10-01)",
    SupportedModel.CLAUDE_3_HAIKU_20240307.value: "Claude 3 Haiku (2024-03-07)",
}

OPENAI_MODELS = {
    SupportedModel.GPT4O.value: "GPT-4o",
    SupportedModel.GPT4O_MINI.value: "GPT-4o mini",
}

GEMINI_MODELS = {
    SupportedModel.GEMINI_2_5_PRO.value: "Gemini 2.5 Pro",
    SupportedModel.GEMINI_2_5_FLASH.value: "Gemini 2.5 Flash",
}


class ModelRouter:
    """Router for dynamically selecting and initializing language models."""

    def __init__(self):
        self.settings = get_settings()
        self._model_cache: Dict[str, BaseChatModel] = {}

    def get_model(self, model_name: str, **kwargs) -> BaseChatModel:
        """
        Get a language model instance based on the model name.

        Args:
            model_name: Name of the model to use
            **kwargs: Additional model configuration parameters

        Returns:
            Initialized language model instance

        Raises:
            ValueError: If model is not supported or API key is missing
        """
        # Check cache first
        cache_key = f"{model_name}_{hash(str(sorted(kwargs.items())))}"
        if cache_key in self._model_cache:
            return self._model_cache[cache_key]

        model = self._create_model(model_name, **kwargs)
        self._model_cache[cache_key] = model
        return model

    def _create_model(self, model_name: str, **kwargs) -> BaseChatModel:
        """Create a new model instance."""
        model_name = model_name.lower()

        # Default model configurations
        default_configs = {
            "temperature": kwargs.pop("temperature", 0.7),
            "max_tokens": kwargs.pop("max_tokens", 4096),
        }

        if model_name in ANTHROPIC_MODELS:
            return self._create_anthropic_model(model_name, default_configs, **kwargs)
        elif model_name in OPENAI_MODELS:
            return self._create_openai_model(model_name, default_configs, **kwargs)
        elif model_name in GEMINI_MODELS:
            return self._create_gemini_model(model_name, default_configs, **kwargs)
        else:
            raise ValueError(f"Unsupported model: {model_name}")

    def _create_anthropic_model(self, model_name: str, default_configs: dict, **kwargs) -> ChatAnthropic:
        """Create an Anthropic (Claude) model instance."""
        # Allow per-call API key override via kwargs['api_key']
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.anthropic_api_key
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY is required for Claude models")

        return ChatAnthropic(
            anthropic_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_tokens=default_configs["max_tokens"],
            **kwargs
        )

    def _create_openai_model(self, model_name: str, default_configs: dict, **kwargs) -> ChatOpenAI:
        """Create an OpenAI model instance."""
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required for OpenAI models")

        return ChatOpenAI(
            openai_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_tokens=default_configs["max_tokens"],
            **kwargs
        )

    def _create_gemini_model(self, model_name: str, default_configs: dict, **kwargs) -> ChatGoogleGenerativeAI:
        """Create a Google Gemini model instance."""
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.gemini_api_key
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required for Gemini models")

        return ChatGoogleGenerativeAI(
            google_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_output_tokens=default_configs["max_tokens"],
            **kwargs
        )

    def get_available_models(self) -> Dict[str, Dict[str, Any]]:
        """
        Get information about available models based on configured API keys.

        Returns:
            Dictionary of available models and their capabilities
        """
        available = {}
        providers = [
            (self.settings.anthropic_api_key, "Anthropic", ANTHROPIC_MODELS),
            (self.settings.openai_api_key, "OpenAI", OPENAI_MODELS),
            (self.settings.gemini_api_key, "Google", GEMINI_MODELS),
        ]
        for api_key, provider, models in providers:
            if not api_key:
                continue
            for name, description in models.items():
                available[name] = {
                    "provider": provider,
                    "description": description,
                    "capabilities": ["text", "glossary", "expansion"],
                }
        return available

    def validate_model_availability(self, model_name: str) -> bool:
        """
        Check if a model is available based on API key configuration.

        Args:
            model_name: Name of the model to check

        Returns:
            True if model is available, False otherwise
        """
        return model_name.lower() in self.get_available_models()


# Global model router instance
model_router = ModelRouter()


def get_model_router() -> ModelRouter:
    """Get the global model router instance."""
    return model_router
