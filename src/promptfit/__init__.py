"""promptfit: token-aware chunking and trimming of prompts for LLM calls.

Text:
    split_chunks, split_chunk_spans, asplit_chunks, TokenChunker,
    trim_tokens, atrim_tokens, TokenTrimmer

Tokenizers:
    Tokenizer, CharacterTokenizer, TiktokenTokenizer, HuggingFaceTokenizer,
    TokenizerResolver, tokenizer_for, count_tokens

Models & Configuration:
    Chunk, ModelContext, ModelProviderName, ModelClass, ModelSettings,
    ProviderConfig, TokenizerConfig, TokenizerKind, PROVIDERS,
    get_provider_config, model_setting_key, resolve_model_name

Generation:
    generate_text, agenerate_text, generate_true_or_false, parse_boolean

Exceptions:
    PromptFitError, InvalidArgumentError, TokenizerError,
    ConfigurationError, GenerationError
"""

from importlib.metadata import PackageNotFoundError, version

from promptfit.exceptions import (
    ConfigurationError,
    GenerationError,
    InvalidArgumentError,
    PromptFitError,
    TokenizerError,
)
from promptfit.generation import (
    agenerate_text,
    generate_text,
    generate_true_or_false,
    parse_boolean,
)
from promptfit.models import (
    PROVIDERS,
    Chunk,
    ModelClass,
    ModelContext,
    ModelProviderName,
    ModelSettings,
    ProviderConfig,
    TokenizerConfig,
    TokenizerKind,
    get_provider_config,
    model_setting_key,
    resolve_model_name,
)
from promptfit.protocols import Chunker, Tokenizer
from promptfit.text import (
    TokenChunker,
    TokenTrimmer,
    asplit_chunks,
    atrim_tokens,
    split_chunk_spans,
    split_chunks,
    trim_tokens,
)
from promptfit.tokens import (
    CharacterTokenizer,
    HuggingFaceTokenizer,
    TiktokenTokenizer,
    TokenizerResolver,
    count_tokens,
    tokenizer_for,
)

try:
    __version__ = version("promptfit")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "PROVIDERS",
    "CharacterTokenizer",
    "Chunk",
    "Chunker",
    "ConfigurationError",
    "GenerationError",
    "HuggingFaceTokenizer",
    "InvalidArgumentError",
    "ModelClass",
    "ModelContext",
    "ModelProviderName",
    "ModelSettings",
    "PromptFitError",
    "ProviderConfig",
    "TiktokenTokenizer",
    "TokenChunker",
    "TokenTrimmer",
    "Tokenizer",
    "TokenizerConfig",
    "TokenizerError",
    "TokenizerKind",
    "TokenizerResolver",
    "agenerate_text",
    "asplit_chunks",
    "atrim_tokens",
    "count_tokens",
    "generate_text",
    "generate_true_or_false",
    "get_provider_config",
    "model_setting_key",
    "parse_boolean",
    "resolve_model_name",
    "split_chunk_spans",
    "split_chunks",
    "tokenizer_for",
    "trim_tokens",
]
