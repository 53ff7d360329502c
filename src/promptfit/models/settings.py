"""Per-provider model settings and the built-in provider table."""

from __future__ import annotations

import logging
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from promptfit.exceptions import ConfigurationError

from .context import ModelClass, ModelContext, ModelProviderName, TokenizerConfig, TokenizerKind

logger = logging.getLogger(__name__)


class ModelSettings(BaseModel):
    """Sampling parameters and token limits for a provider's text models."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_input_tokens: int = Field(gt=0)
    max_output_tokens: int = Field(gt=0)
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    repetition_penalty: float | None = None
    stop: tuple[str, ...] = ()


class ProviderConfig(BaseModel):
    """Endpoint, settings, models per class and default tokenizer of a provider."""

    model_config = ConfigDict(frozen=True)

    endpoint: str | None = None
    settings: ModelSettings
    model: dict[ModelClass, str]
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    # Prefix of the model override settings; defaults to the upper-cased provider name.
    setting_prefix: str | None = None

    @model_validator(mode="after")
    def validate_models(self) -> Self:
        if ModelClass.SMALL not in self.model:
            msg = "provider config must define a model for the 'small' class"
            raise ValueError(msg)
        return self


PROVIDERS: dict[ModelProviderName, ProviderConfig] = {
    ModelProviderName.OPENAI: ProviderConfig(
        endpoint="https://api.openai.com/v1",
        settings=ModelSettings(
            temperature=0.6,
            max_input_tokens=128000,
            max_output_tokens=8192,
            frequency_penalty=0.0,
            presence_penalty=0.0,
        ),
        model={
            ModelClass.SMALL: "gpt-4o-mini",
            ModelClass.MEDIUM: "gpt-4o",
            ModelClass.LARGE: "gpt-4o",
            ModelClass.EMBEDDING: "text-embedding-3-small",
            ModelClass.IMAGE: "dall-e-3",
        },
    ),
    ModelProviderName.ANTHROPIC: ProviderConfig(
        endpoint="https://api.anthropic.com/v1",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=200000,
            max_output_tokens=4096,
            frequency_penalty=0.4,
            presence_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "claude-3-haiku-20240307",
            ModelClass.MEDIUM: "claude-3-5-sonnet-20241022",
            ModelClass.LARGE: "claude-3-5-sonnet-20241022",
        },
        # No public tokenizer; cl100k_base is close enough for budgeting.
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4"),
    ),
    ModelProviderName.GROQ: ProviderConfig(
        endpoint="https://api.groq.com/openai/v1",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=128000,
            max_output_tokens=8000,
            frequency_penalty=0.4,
            presence_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "llama-3.1-8b-instant",
            ModelClass.MEDIUM: "llama-3.3-70b-versatile",
            ModelClass.LARGE: "llama-3.2-90b-vision-preview",
        },
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4o"),
    ),
    ModelProviderName.LLAMACLOUD: ProviderConfig(
        endpoint="https://api.llamacloud.com/v1",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=128000,
            max_output_tokens=8192,
            repetition_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "meta-llama/Llama-3.2-3B-Instruct-Turbo",
            ModelClass.MEDIUM: "meta-llama-3.1-8b-instruct",
            ModelClass.LARGE: "meta-llama/Meta-Llama-3.1-405B-Instruct-Turbo",
        },
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4o"),
        setting_prefix="LLAMACLOUD",
    ),
    ModelProviderName.TOGETHER: ProviderConfig(
        endpoint="https://api.together.ai/v1",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=128000,
            max_output_tokens=8192,
            repetition_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "meta-llama/Llama-3.2-3B-Instruct-Turbo",
            ModelClass.MEDIUM: "meta-llama-3.1-8b-instruct",
            ModelClass.LARGE: "meta-llama/Meta-Llama-3.1-405B-Instruct-Turbo",
        },
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4o"),
    ),
    ModelProviderName.OLLAMA: ProviderConfig(
        endpoint="http://localhost:11434",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=128000,
            max_output_tokens=8192,
            frequency_penalty=0.4,
            presence_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "llama3.2",
            ModelClass.MEDIUM: "hermes3",
            ModelClass.LARGE: "hermes3:70b",
            ModelClass.EMBEDDING: "mxbai-embed-large",
        },
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4o"),
    ),
    ModelProviderName.LIVEPEER: ProviderConfig(
        endpoint="http://gateway.livepeer-eliza.com:8941",
        settings=ModelSettings(
            temperature=0.7,
            max_input_tokens=128000,
            max_output_tokens=8192,
            repetition_penalty=0.4,
        ),
        model={
            ModelClass.SMALL: "meta-llama/Meta-Llama-3.1-8B-Instruct",
            ModelClass.MEDIUM: "meta-llama/Meta-Llama-3.1-8B-Instruct",
            ModelClass.LARGE: "meta-llama/Meta-Llama-3.1-8B-Instruct",
            ModelClass.IMAGE: "ByteDance/SDXL-Lightning",
        },
        tokenizer=TokenizerConfig(kind=TokenizerKind.TIKTOKEN, model="gpt-4o"),
    ),
}


def get_provider_config(provider: ModelProviderName | str) -> ProviderConfig:
    """Look up a provider in the built-in table.

    Raises:
        ConfigurationError: If the provider has no entry.
    """
    try:
        return PROVIDERS[ModelProviderName(provider)]
    except (ValueError, KeyError):
        msg = f"Unknown model provider: {provider!r}"
        raise ConfigurationError(msg) from None


_SETTING_KEYS: dict[ModelClass, str] = {
    ModelClass.SMALL: "{prefix}_MODEL_SMALL",
    ModelClass.MEDIUM: "{prefix}_MODEL_MEDIUM",
    ModelClass.LARGE: "{prefix}_MODEL_LARGE",
    ModelClass.EMBEDDING: "{prefix}_EMBEDDING_MODEL",
    ModelClass.IMAGE: "{prefix}_IMAGE_MODEL",
}


def model_setting_key(provider: ModelProviderName | str, model_class: ModelClass | str) -> str:
    """Return the setting that overrides a provider's model for a class.

    ``LIVEPEER_IMAGE_MODEL``, ``LLAMACLOUD_MODEL_LARGE``, ``OPENAI_MODEL_SMALL``.
    Providers outside the table use their upper-cased name as prefix.
    """
    try:
        prefix = get_provider_config(provider).setting_prefix
    except ConfigurationError:
        prefix = None
    prefix = prefix or str(provider).upper()
    try:
        template = _SETTING_KEYS[ModelClass(model_class)]
    except ValueError:
        template = "{prefix}_MODEL_" + str(model_class).upper()
    return template.format(prefix=prefix)


def resolve_model_name(context: ModelContext) -> str:
    """Return the concrete model name a context runs against.

    Precedence: ``context.model``, then the override setting named by
    :func:`model_setting_key`, then the provider table.  Classes the
    provider does not define fall back to its ``small`` model.

    Raises:
        ConfigurationError: If the provider is not in the table and no
            explicit model or setting names one.
    """
    if context.model:
        return context.model

    provider = str(context.provider)
    model_class = str(context.model_class)
    override = context.get_setting(model_setting_key(provider, model_class))
    if override:
        return override

    config = get_provider_config(provider)
    try:
        return config.model[ModelClass(model_class)]
    except (ValueError, KeyError):
        logger.debug(
            "Provider %s has no %r model; using its small model", provider, model_class
        )
        return config.model[ModelClass.SMALL]
