"""Tail truncation of text to a token budget."""

from __future__ import annotations

import asyncio
import logging

from promptfit.models.context import ModelContext
from promptfit.protocols.tokenizer import Tokenizer
from promptfit.tokens.resolver import TokenizerResolver, tokenizer_for

from ._boundaries import REPLACEMENT_CHAR, is_clean_boundary, require_int

logger = logging.getLogger(__name__)


def _trim_with(text: str, max_tokens: int, tokenizer: Tokenizer) -> str:
    tokens = tokenizer.encode(text)
    if len(tokens) <= max_tokens:
        return text

    # Keep the most recent context: the last max_tokens tokens.
    start = len(tokens) - max_tokens
    if REPLACEMENT_CHAR not in text:
        while not is_clean_boundary(tokenizer, tokens, start):
            start += 1

    trimmed = tokenizer.decode(tokens[start:])
    logger.debug(
        "Trimmed %d tokens to %d with %r", len(tokens), len(tokens) - start, tokenizer
    )
    return trimmed


def trim_tokens(
    text: str,
    max_tokens: int,
    context: ModelContext | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> str:
    """Truncate ``text`` so that it encodes to at most ``max_tokens`` tokens.

    The tail of the text is kept.  Text already within budget is returned
    unchanged.  When the cut would land inside a multi-byte character, the
    partial character is dropped rather than decoded into U+FFFD, so the
    result may hold slightly fewer than ``max_tokens`` tokens.  If the budget
    cannot hold even the last whole character (e.g. 2 byte-level tokens
    before a 4-byte emoji) the result is ``""``: the budget is never
    exceeded and partial characters are never returned.

    Parameters:
        text: The text to trim.
        max_tokens: The token budget; must be a positive integer.
        context: Model configuration used to pick the tokenizer.  Unknown
            providers or models fall back to a generic tokenizer.
        tokenizer: Explicit tokenizer; takes precedence over ``context``.

    Returns:
        The trimmed text, a suffix region of ``text``.

    Raises:
        InvalidArgumentError: If ``max_tokens`` is not a positive integer.
        TokenizerError: If the tokenizer fails to encode or decode.
    """
    require_int("max_tokens", max_tokens, minimum=1)
    if not text:
        return ""
    return _trim_with(text, max_tokens, tokenizer or tokenizer_for(context))


async def atrim_tokens(
    text: str,
    max_tokens: int,
    context: ModelContext | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> str:
    """Async variant of :func:`trim_tokens` running in a worker thread.

    Argument errors are raised before any work is scheduled.
    """
    require_int("max_tokens", max_tokens, minimum=1)
    if not text:
        return ""
    return await asyncio.to_thread(trim_tokens, text, max_tokens, context, tokenizer=tokenizer)


class TokenTrimmer:
    """Trim text to token budgets using a configurable tokenizer resolver.

    Useful when a non-default :class:`TokenizerResolver` (for example one with
    extra registered tokenizer kinds) should drive tokenizer selection.
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: TokenizerResolver | None = None) -> None:
        self._resolver = resolver or TokenizerResolver()

    def trim(self, text: str, max_tokens: int, context: ModelContext | None = None) -> str:
        """Trim ``text`` to ``max_tokens`` tokens, see :func:`trim_tokens`."""
        require_int("max_tokens", max_tokens, minimum=1)
        if not text:
            return ""
        return _trim_with(text, max_tokens, self._resolver.resolve(context))

    async def atrim(self, text: str, max_tokens: int, context: ModelContext | None = None) -> str:
        """Async variant of :meth:`trim`."""
        require_int("max_tokens", max_tokens, minimum=1)
        if not text:
            return ""
        return await asyncio.to_thread(self.trim, text, max_tokens, context)

    def __repr__(self) -> str:
        return f"TokenTrimmer(resolver={self._resolver!r})"
