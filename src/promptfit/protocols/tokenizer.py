"""Tokenizer protocol for token encoding abstraction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Tokenizer(Protocol):
    """Protocol for turning text into token ids and back.

    The built-in implementations wrap tiktoken, HuggingFace ``transformers``
    and a plain code-point encoding, but users can provide any tokenizer
    (e.g., sentencepiece) that exposes these two methods.
    """

    def encode(self, text: str) -> list[int]:
        """Encode text into a list of token ids.

        Parameters:
            text: The input text to tokenize.

        Returns:
            The token ids in order.  An empty string encodes to an empty list.
        """
        ...

    def decode(self, tokens: Sequence[int]) -> str:
        """Decode token ids back into text.

        Parameters:
            tokens: Token ids, typically a slice of a previous ``encode``
                result.

        Returns:
            The decoded text.  Byte-level tokenizers may emit U+FFFD for a
            slice that starts or ends inside a multi-byte character.
        """
        ...
