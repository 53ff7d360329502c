"""Model context: which provider, model and tokenizer a call runs against."""

from __future__ import annotations

import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ModelProviderName(StrEnum):
    """Model providers with an entry in the provider table."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GROQ = "groq"
    LLAMACLOUD = "llama_cloud"
    TOGETHER = "together"
    OLLAMA = "ollama"
    LIVEPEER = "livepeer"


class ModelClass(StrEnum):
    """Size/purpose class used to pick a concrete model from a provider."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EMBEDDING = "embedding"
    IMAGE = "image"


class TokenizerKind(StrEnum):
    """Tokenizer families known to the resolver.

    ``AUTO`` loads a HuggingFace tokenizer for the model, ``TIKTOKEN`` uses
    OpenAI's BPE encodings and ``CHARACTER`` counts one token per code point.
    """

    AUTO = "auto"
    TIKTOKEN = "tiktoken"
    CHARACTER = "character"


class TokenizerConfig(BaseModel):
    """Tokenizer selection: a family plus an optional tokenizer model name."""

    model_config = ConfigDict(frozen=True)

    kind: TokenizerKind = TokenizerKind.TIKTOKEN
    model: str | None = None


class ModelContext(BaseModel):
    """Identifies the active model configuration for a call.

    ``provider`` accepts any string so that contexts naming providers outside
    the built-in table can still be constructed; token trimming falls back to
    a generic tokenizer for them.

    Settings are looked up in ``settings`` first and then in the process
    environment, mirroring how runtime secrets and model overrides are
    usually supplied (``OPENAI_MODEL_LARGE``, ``LIVEPEER_IMAGE_MODEL``...).
    """

    model_config = ConfigDict(protected_namespaces=())

    provider: ModelProviderName | str = ModelProviderName.OPENAI
    model_class: ModelClass | str = ModelClass.SMALL
    model: str | None = None
    tokenizer: TokenizerConfig | None = None
    settings: dict[str, str] = Field(default_factory=dict)

    def get_setting(self, key: str, default: str | None = None) -> str | None:
        """Return a setting from the context, then the environment."""
        if key in self.settings:
            return self.settings[key]
        return os.environ.get(key, default)
