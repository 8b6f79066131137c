"""Shared plumbing for model-backed workflow components."""

from typing import Callable, Optional

from langchain_core.language_models import BaseChatModel

from ..config import GenerationConfig
from ..exceptions import UpstreamProviderError


ModelProvider = Callable[[], BaseChatModel]


class ModelComponent:
    """
    Holds a chat model, or a provider that builds one on first use.

    Components read ``self.model`` only after their inputs are validated,
    so an unconfigured provider never hides a client error.
    """

    def __init__(
        self,
        model: Optional[BaseChatModel] = None,
        config: Optional[GenerationConfig] = None,
        model_provider: Optional[ModelProvider] = None,
    ):
        if model is None and model_provider is None:
            raise ValueError("Either model or model_provider is required")
        self._model = model
        self._model_provider = model_provider
        self.config = config or GenerationConfig()

    @property
    def model(self) -> BaseChatModel:
        if self._model is None:
            try:
                self._model = self._model_provider()
            except ValueError as e:
                # Unknown model name or missing API key
                raise UpstreamProviderError(str(e)) from e
        return self._model
