"""Tokenizer selection from a model context.

The resolver is a strategy table keyed on :class:`TokenizerKind`.  Each
entry is a factory taking the tokenizer model name.  Resolution never fails
because a provider or model is unknown: it degrades to tiktoken's encoding
for :data:`FALLBACK_MODEL` and, when that is unavailable too, to
:class:`CharacterTokenizer`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from promptfit.exceptions import ConfigurationError, TokenizerError
from promptfit.models.context import ModelContext, TokenizerConfig, TokenizerKind
from promptfit.models.settings import get_provider_config, resolve_model_name
from promptfit.protocols.tokenizer import Tokenizer

from .character import CharacterTokenizer
from .huggingface import HuggingFaceTokenizer
from .tiktoken_tokenizer import TiktokenTokenizer

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "gpt-4o"

TokenizerFactory = Callable[[str | None], Tokenizer]


def _tiktoken_factory(model: str | None) -> Tokenizer:
    if model is None:
        return TiktokenTokenizer()
    return TiktokenTokenizer(model=model)


def _huggingface_factory(model: str | None) -> Tokenizer:
    if not model:
        msg = "HuggingFace tokenizers need a model name"
        raise TokenizerError(msg)
    return HuggingFaceTokenizer(model)


def _character_factory(model: str | None) -> Tokenizer:
    return CharacterTokenizer()


class TokenizerResolver:
    """Resolve the tokenizer matching a :class:`ModelContext`.

    Selection order for the tokenizer config: ``context.tokenizer``, then
    the provider's default from the provider table, then tiktoken.  The
    tokenizer model name is the config's ``model`` or, when unset, the model
    the context resolves to.

    A fresh tokenizer is built on every call; caching, where any, lives in
    the underlying libraries.
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: dict[TokenizerKind, TokenizerFactory] | None = None) -> None:
        self._factories: dict[TokenizerKind, TokenizerFactory] = {
            TokenizerKind.TIKTOKEN: _tiktoken_factory,
            TokenizerKind.AUTO: _huggingface_factory,
            TokenizerKind.CHARACTER: _character_factory,
        }
        if factories:
            self._factories.update(factories)

    def register(self, kind: TokenizerKind, factory: TokenizerFactory) -> None:
        """Register or replace the factory for a tokenizer kind."""
        self._factories[kind] = factory

    def resolve(self, context: ModelContext | None = None) -> Tokenizer:
        """Return a tokenizer for ``context``, falling back when needed.

        Parameters:
            context: The active model configuration.  ``None`` selects the
                generic fallback directly.

        Returns:
            A tokenizer; never raises for unknown providers or models.
        """
        if context is None:
            return self.fallback()

        config = self._config_for(context)
        model = config.model or self._model_for(context)
        try:
            tokenizer = self._factories[config.kind](model)
        except (ImportError, TokenizerError) as exc:
            logger.warning(
                "Tokenizer %s for model %r unavailable (%s); using fallback",
                config.kind,
                model,
                exc,
            )
            return self.fallback()

        logger.debug("Resolved %r for provider %s", tokenizer, context.provider)
        return tokenizer

    def fallback(self) -> Tokenizer:
        """Return the generic tokenizer used when nothing specific resolves."""
        try:
            return self._factories[TokenizerKind.TIKTOKEN](FALLBACK_MODEL)
        except (ImportError, TokenizerError) as exc:
            logger.warning("tiktoken unavailable (%s); counting characters instead", exc)
            return CharacterTokenizer()

    @staticmethod
    def _config_for(context: ModelContext) -> TokenizerConfig:
        if context.tokenizer is not None:
            return context.tokenizer
        try:
            return get_provider_config(context.provider).tokenizer
        except ConfigurationError:
            logger.debug("No provider entry for %r; defaulting to tiktoken", context.provider)
            return TokenizerConfig()

    @staticmethod
    def _model_for(context: ModelContext) -> str | None:
        try:
            return resolve_model_name(context)
        except ConfigurationError:
            return None

    def __repr__(self) -> str:
        kinds = ", ".join(str(kind) for kind in self._factories)
        return f"{type(self).__name__}(kinds=[{kinds}])"


_default_resolver = TokenizerResolver()


def tokenizer_for(context: ModelContext | None = None) -> Tokenizer:
    """Resolve a tokenizer for ``context`` with the default resolver."""
    return _default_resolver.resolve(context)


def count_tokens(text: str, tokenizer: Tokenizer) -> int:
    """Count the tokens ``tokenizer`` produces for ``text``."""
    if not text:
        return 0
    return len(tokenizer.encode(text))
