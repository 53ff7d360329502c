"""Custom exceptions for promptfit."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "InvalidArgumentError",
    "PromptFitError",
    "TokenizerError",
]


class PromptFitError(Exception):
    """Base exception for all promptfit errors."""


class InvalidArgumentError(PromptFitError, ValueError):
    """Raised when a caller passes an argument outside its contract.

    Examples are a non-positive ``max_tokens`` or a ``bleed`` that is not
    smaller than ``chunk_size``.  Values are never clamped silently.

    Messages name the Python parameter and keep a stable prefix for
    matching, e.g. ``"max_tokens must be positive, got 0"``.
    """


class TokenizerError(PromptFitError):
    """Raised when a tokenizer cannot be built or fails to encode/decode."""


class ConfigurationError(PromptFitError):
    """Raised when a provider or model configuration cannot be found."""


class GenerationError(PromptFitError):
    """Raised when a completion response cannot be interpreted."""
