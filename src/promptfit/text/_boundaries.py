"""Helpers for keeping token slices on whole-character boundaries."""

from __future__ import annotations

from collections.abc import Sequence

from promptfit.exceptions import InvalidArgumentError
from promptfit.protocols.tokenizer import Tokenizer

REPLACEMENT_CHAR = "\ufffd"

# A UTF-8 character spans at most 4 bytes, hence at most 4 byte-level tokens.
_MAX_TOKENS_PER_CHAR = 4


def require_int(name: str, value: object, *, minimum: int) -> int:
    """Return ``value`` if it is an int of at least ``minimum``.

    Raises:
        InvalidArgumentError: For bools, non-ints and values below ``minimum``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    if value < minimum:
        qualifier = "positive" if minimum == 1 else f"at least {minimum}"
        msg = f"{name} must be {qualifier}, got {value}"
        raise InvalidArgumentError(msg)
    return value


def is_clean_boundary(tokenizer: Tokenizer, tokens: Sequence[int], index: int) -> bool:
    """Whether cutting ``tokens`` at ``index`` keeps both sides whole.

    A cut inside a multi-byte character shows up as a U+FFFD at the end of
    the left side or the start of the right side once decoded.  Only a few
    tokens on each side are decoded.  Callers must not use this for text that
    already contains U+FFFD.
    """
    if index <= 0 or index >= len(tokens):
        return True
    left = tokenizer.decode(tokens[max(0, index - _MAX_TOKENS_PER_CHAR) : index])
    if left.endswith(REPLACEMENT_CHAR):
        return False
    right = tokenizer.decode(tokens[index : index + _MAX_TOKENS_PER_CHAR])
    return not right.startswith(REPLACEMENT_CHAR)
