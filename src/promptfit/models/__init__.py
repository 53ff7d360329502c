"""Pydantic models for model configuration and chunking output."""

from .chunk import Chunk
from .context import ModelClass, ModelContext, ModelProviderName, TokenizerConfig, TokenizerKind
from .settings import (
    PROVIDERS,
    ModelSettings,
    ProviderConfig,
    get_provider_config,
    model_setting_key,
    resolve_model_name,
)

__all__ = [
    "PROVIDERS",
    "Chunk",
    "ModelClass",
    "ModelContext",
    "ModelProviderName",
    "ModelSettings",
    "ProviderConfig",
    "TokenizerConfig",
    "TokenizerKind",
    "get_provider_config",
    "model_setting_key",
    "resolve_model_name",
]
