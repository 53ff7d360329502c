"""Tests for promptfit.tokens.character."""

from __future__ import annotations

from promptfit.protocols.tokenizer import Tokenizer
from promptfit.tokens.character import CharacterTokenizer


class TestCharacterTokenizer:
    def test_one_token_per_code_point(self) -> None:
        tokenizer = CharacterTokenizer()
        assert tokenizer.encode("ab\U0001f30d") == [97, 98, 0x1F30D]

    def test_empty_string(self) -> None:
        assert CharacterTokenizer().encode("") == []
        assert CharacterTokenizer().decode([]) == ""

    def test_lossless_round_trip(self) -> None:
        tokenizer = CharacterTokenizer()
        text = "Line 1\n\tLine 2 \U0001f44b café 中文"
        assert tokenizer.decode(tokenizer.encode(text)) == text

    def test_satisfies_protocol(self) -> None:
        assert isinstance(CharacterTokenizer(), Tokenizer)

    def test_repr(self) -> None:
        assert repr(CharacterTokenizer()) == "CharacterTokenizer()"
