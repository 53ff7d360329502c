"""Tokenizer backed by OpenAI's tiktoken library."""

from __future__ import annotations

from collections.abc import Sequence

from promptfit.exceptions import TokenizerError

DEFAULT_ENCODING = "cl100k_base"


class TiktokenTokenizer:
    """Tokenizer using OpenAI's tiktoken library.

    Pass ``model`` to use the encoding tiktoken associates with that model
    name (``gpt-4o`` -> ``o200k_base``), or ``encoding_name`` to pick an
    encoding directly.  With neither, ``cl100k_base`` is used.

    Implements the Tokenizer protocol via structural subtyping.

    The tiktoken import is deferred to ``__init__`` so that importing this
    module does not trigger BPE data loading when callers supply their own
    :class:`~promptfit.protocols.tokenizer.Tokenizer` implementation.

    Raises:
        ImportError: If tiktoken is not installed.
        TokenizerError: If ``model`` is unknown to tiktoken or the encoding
            data cannot be loaded.
    """

    __slots__ = ("_encoding",)

    def __init__(self, encoding_name: str | None = None, model: str | None = None) -> None:
        try:
            import tiktoken
        except ImportError:
            msg = (
                "tiktoken is required for the tiktoken tokenizer. "
                "Install it with: pip install promptfit[tiktoken] "
                "or pip install tiktoken"
            )
            raise ImportError(msg) from None

        try:
            if model is not None and encoding_name is None:
                self._encoding = tiktoken.encoding_for_model(model)
            else:
                self._encoding = tiktoken.get_encoding(encoding_name or DEFAULT_ENCODING)
        except KeyError as exc:
            msg = f"tiktoken has no encoding for model {model!r}"
            raise TokenizerError(msg) from exc
        except (ValueError, OSError) as exc:
            msg = f"Could not load tiktoken encoding: {exc}"
            raise TokenizerError(msg) from exc

    @property
    def encoding_name(self) -> str:
        return self._encoding.name

    def encode(self, text: str) -> list[int]:
        """Encode text, treating special-token markup as plain text."""
        try:
            return self._encoding.encode(text, disallowed_special=())
        except ValueError as exc:
            msg = f"tiktoken failed to encode text: {exc}"
            raise TokenizerError(msg) from exc

    def decode(self, tokens: Sequence[int]) -> str:
        try:
            return self._encoding.decode(list(tokens))
        except (KeyError, ValueError) as exc:
            msg = f"tiktoken failed to decode tokens: {exc}"
            raise TokenizerError(msg) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(encoding={self._encoding.name!r})"
