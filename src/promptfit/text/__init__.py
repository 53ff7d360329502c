"""Token-aware text splitting and trimming."""

from .chunking import TokenChunker, asplit_chunks, split_chunk_spans, split_chunks
from .trimming import TokenTrimmer, atrim_tokens, trim_tokens

__all__ = [
    "TokenChunker",
    "TokenTrimmer",
    "asplit_chunks",
    "atrim_tokens",
    "split_chunk_spans",
    "split_chunks",
    "trim_tokens",
]
