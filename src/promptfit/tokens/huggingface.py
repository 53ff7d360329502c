"""Tokenizer backed by a HuggingFace ``transformers`` tokenizer."""

from __future__ import annotations

from collections.abc import Sequence

from promptfit.exceptions import TokenizerError


class HuggingFaceTokenizer:
    """Tokenizer loaded with ``transformers.AutoTokenizer``.

    Special tokens are neither added on encode nor emitted on decode, so
    token counts reflect the text alone.

    Implements the Tokenizer protocol via structural subtyping.

    Raises:
        ImportError: If transformers is not installed.
        TokenizerError: If the tokenizer for ``model`` cannot be loaded.
    """

    __slots__ = ("_model", "_tokenizer")

    def __init__(self, model: str) -> None:
        try:
            from transformers import AutoTokenizer
        except ImportError:
            msg = (
                "transformers is required for HuggingFace tokenizers. "
                "Install it with: pip install promptfit[huggingface] "
                "or pip install transformers"
            )
            raise ImportError(msg) from None

        try:
            self._tokenizer = AutoTokenizer.from_pretrained(model)
        except (OSError, ValueError) as exc:
            msg = f"Could not load HuggingFace tokenizer {model!r}: {exc}"
            raise TokenizerError(msg) from exc
        self._model = model

    def encode(self, text: str) -> list[int]:
        try:
            return list(self._tokenizer.encode(text, add_special_tokens=False))
        except (TypeError, ValueError) as exc:
            msg = f"{self._model} failed to encode text: {exc}"
            raise TokenizerError(msg) from exc

    def decode(self, tokens: Sequence[int]) -> str:
        try:
            return self._tokenizer.decode(list(tokens), skip_special_tokens=True)
        except (TypeError, ValueError, OverflowError) as exc:
            msg = f"{self._model} failed to decode tokens: {exc}"
            raise TokenizerError(msg) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._model!r})"
