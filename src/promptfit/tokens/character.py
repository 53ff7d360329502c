"""Model-agnostic tokenizer counting one token per Unicode code point."""

from __future__ import annotations

from collections.abc import Sequence


class CharacterTokenizer:
    """Encode text as its Unicode code points.

    Lossless and dependency-free, so it is the last fallback when no
    model-specific tokenizer can be resolved.  Token budgets measured with it
    are character budgets, which overestimates BPE token counts for most
    languages and therefore trims conservatively.

    Implements the Tokenizer protocol via structural subtyping.
    """

    __slots__ = ()

    def encode(self, text: str) -> list[int]:
        return [ord(char) for char in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(map(chr, tokens))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
