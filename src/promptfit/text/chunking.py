"""Token-window splitting of long documents into overlapping chunks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from promptfit.exceptions import InvalidArgumentError
from promptfit.models.chunk import Chunk
from promptfit.protocols.tokenizer import Tokenizer
from promptfit.tokens.character import CharacterTokenizer

from ._boundaries import REPLACEMENT_CHAR, is_clean_boundary, require_int

logger = logging.getLogger(__name__)


def _validate(chunk_size: int, bleed: int) -> None:
    require_int("chunk_size", chunk_size, minimum=1)
    require_int("bleed", bleed, minimum=0)
    if bleed >= chunk_size:
        msg = f"bleed ({bleed}) must be less than chunk_size ({chunk_size})"
        raise InvalidArgumentError(msg)


def _window_spans(
    token_count: int,
    chunk_size: int,
    bleed: int,
    is_clean: Callable[[int], bool],
) -> list[tuple[int, int]]:
    """Compute ``(start, end)`` token spans of every window.

    Each window starts ``bleed`` tokens before the previous one ends.  A
    window end that would cut a character is pulled back until both the end
    and the next window's start are clean, as long as the window still moves
    forward; otherwise the nominal end is kept.
    """
    spans: list[tuple[int, int]] = []
    start = 0
    while True:
        end = min(start + chunk_size, token_count)
        if end < token_count:
            candidate = end
            while candidate > start + bleed:
                if is_clean(candidate) and is_clean(candidate - bleed):
                    end = candidate
                    break
                candidate -= 1
        spans.append((start, end))
        if end >= token_count:
            return spans
        start = end - bleed


def split_chunk_spans(
    content: str,
    chunk_size: int,
    bleed: int,
    tokenizer: Tokenizer | None = None,
) -> list[Chunk]:
    """Split ``content`` into overlapping token windows tagged with offsets.

    Parameters:
        content: The text to split.
        chunk_size: Maximum tokens per chunk; must be positive.
        bleed: Tokens shared by consecutive chunks; ``0 <= bleed < chunk_size``.
        tokenizer: Tokenizer defining the token domain.  Defaults to
            :class:`CharacterTokenizer`.

    Returns:
        The chunks in order.  Empty content yields ``[]``; content that fits
        in one window yields a single chunk holding ``content`` unchanged.

    Raises:
        InvalidArgumentError: If ``chunk_size`` or ``bleed`` is invalid.
    """
    _validate(chunk_size, bleed)
    if not content:
        return []

    tokenizer = tokenizer or CharacterTokenizer()
    tokens = tokenizer.encode(content)
    if len(tokens) <= chunk_size:
        return [Chunk(index=0, text=content, start=0, end=len(tokens))]

    # Text that already holds U+FFFD cannot be checked for split characters.
    check_boundaries = REPLACEMENT_CHAR not in content

    def is_clean(index: int) -> bool:
        return not check_boundaries or is_clean_boundary(tokenizer, tokens, index)

    spans = _window_spans(len(tokens), chunk_size, bleed, is_clean)
    logger.debug(
        "Split %d tokens into %d chunks (chunk_size=%d, bleed=%d)",
        len(tokens),
        len(spans),
        chunk_size,
        bleed,
    )
    return [
        Chunk(index=i, text=tokenizer.decode(tokens[start:end]), start=start, end=end)
        for i, (start, end) in enumerate(spans)
    ]


def split_chunks(
    content: str,
    chunk_size: int,
    bleed: int,
    tokenizer: Tokenizer | None = None,
) -> list[str]:
    """Split ``content`` into overlapping chunks of at most ``chunk_size`` tokens.

    The trailing ``bleed`` tokens of every chunk equal the leading ``bleed``
    tokens of the next one.  See :func:`split_chunk_spans` for details.
    """
    return [chunk.text for chunk in split_chunk_spans(content, chunk_size, bleed, tokenizer)]


async def asplit_chunks(
    content: str,
    chunk_size: int,
    bleed: int,
    tokenizer: Tokenizer | None = None,
) -> list[str]:
    """Async variant of :func:`split_chunks` running in a worker thread.

    Argument errors are raised before any work is scheduled.
    """
    _validate(chunk_size, bleed)
    return await asyncio.to_thread(split_chunks, content, chunk_size, bleed, tokenizer)


class TokenChunker:
    """Split text into fixed-size token windows with overlap.

    Implements the ``Chunker`` protocol.
    """

    __slots__ = ("_bleed", "_chunk_size", "_tokenizer")

    def __init__(
        self,
        chunk_size: int = 512,
        bleed: int = 50,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        _validate(chunk_size, bleed)
        self._chunk_size = chunk_size
        self._bleed = bleed
        self._tokenizer = tokenizer or CharacterTokenizer()

    def chunk(self, text: str, metadata: dict[str, Any] | None = None) -> list[str]:
        """Split text into overlapping token windows.

        Parameters:
            text: The text to chunk.
            metadata: Unused; accepted for protocol compliance.

        Returns:
            A list of text chunks.
        """
        return split_chunks(text, self._chunk_size, self._bleed, self._tokenizer)

    def spans(self, text: str) -> list[Chunk]:
        """Like :meth:`chunk` but returns :class:`Chunk` objects with offsets."""
        return split_chunk_spans(text, self._chunk_size, self._bleed, self._tokenizer)

    def __repr__(self) -> str:
        return f"TokenChunker(chunk_size={self._chunk_size}, bleed={self._bleed})"
