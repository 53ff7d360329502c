"""Tokenizer implementations and model-aware tokenizer selection."""

from .character import CharacterTokenizer
from .huggingface import HuggingFaceTokenizer
from .resolver import FALLBACK_MODEL, TokenizerResolver, count_tokens, tokenizer_for
from .tiktoken_tokenizer import TiktokenTokenizer

__all__ = [
    "FALLBACK_MODEL",
    "CharacterTokenizer",
    "HuggingFaceTokenizer",
    "TiktokenTokenizer",
    "TokenizerResolver",
    "count_tokens",
    "tokenizer_for",
]
