"""Shared fixtures for promptfit tests."""

from __future__ import annotations

import sys
import types
from collections.abc import Sequence

import pytest

from promptfit.models.settings import ModelSettings


class ByteTokenizer:
    """A byte-level tokenizer: one token per UTF-8 byte.

    Behaves like a byte-level BPE at its worst: any slice may start or end in
    the middle of a multi-byte character, and decoding such a slice yields
    U+FFFD replacement characters.
    """

    def encode(self, text: str) -> list[int]:
        return list(text.encode("utf-8"))

    def decode(self, tokens: Sequence[int]) -> str:
        return bytes(tokens).decode("utf-8", errors="replace")


class ExplodingTokenizer:
    """Tokenizer that fails on any use, for asserting it is never called."""

    def encode(self, text: str) -> list[int]:
        msg = "encode should not be called"
        raise AssertionError(msg)

    def decode(self, tokens: Sequence[int]) -> str:
        msg = "decode should not be called"
        raise AssertionError(msg)


class FakeCompletion:
    """Completion callable returning queued responses and recording calls.

    Once the queue is exhausted the last response is repeated.
    """

    def __init__(self, *responses: str) -> None:
        self._responses = list(responses) or ["mocked response"]
        self.calls: list[tuple[str, str, ModelSettings]] = []

    def __call__(self, prompt: str, *, model: str, settings: ModelSettings) -> str:
        self.calls.append((prompt, model, settings))
        index = min(len(self.calls), len(self._responses)) - 1
        return self._responses[index]


class FakeAsyncCompletion(FakeCompletion):
    """Async flavour of :class:`FakeCompletion`."""

    async def __call__(self, prompt: str, *, model: str, settings: ModelSettings) -> str:  # type: ignore[override]
        return super().__call__(prompt, model=model, settings=settings)


class FakeEncoding:
    """Offline stand-in for a tiktoken ``Encoding`` (byte-level)."""

    def __init__(self, name: str) -> None:
        self.name = name

    def encode(self, text: str, **kwargs: object) -> list[int]:
        return list(text.encode("utf-8"))

    def decode(self, tokens: list[int]) -> str:
        return bytes(tokens).decode("utf-8", errors="replace")


def make_fake_tiktoken() -> types.ModuleType:
    """Build a fake ``tiktoken`` module that needs no downloaded BPE data.

    ``encoding_for_model`` knows every ``gpt-*`` model (mapping ``gpt-4o*``
    to ``o200k_base`` and the rest to ``cl100k_base``) and raises
    ``KeyError`` for anything else, like the real library.
    """
    module = types.ModuleType("tiktoken")
    known = {"cl100k_base", "o200k_base"}

    def get_encoding(name: str) -> FakeEncoding:
        if name not in known:
            msg = f"Unknown encoding {name}"
            raise ValueError(msg)
        return FakeEncoding(name)

    def encoding_for_model(model: str) -> FakeEncoding:
        if model.startswith("gpt-4o"):
            return FakeEncoding("o200k_base")
        if model.startswith("gpt-"):
            return FakeEncoding("cl100k_base")
        raise KeyError(model)

    module.get_encoding = get_encoding  # type: ignore[attr-defined]
    module.encoding_for_model = encoding_for_model  # type: ignore[attr-defined]
    return module


class FakeHFTokenizer:
    """Offline stand-in for a ``transformers`` tokenizer (byte-level)."""

    def __init__(self, name: str) -> None:
        self.name_or_path = name

    def encode(self, text: str, add_special_tokens: bool = True) -> list[int]:
        ids = list(text.encode("utf-8"))
        return [256, *ids] if add_special_tokens else ids

    def decode(self, ids: list[int], skip_special_tokens: bool = False) -> str:
        if skip_special_tokens:
            ids = [i for i in ids if i < 256]
        return bytes(i for i in ids if i < 256).decode("utf-8", errors="replace")


def make_fake_transformers() -> types.ModuleType:
    """Build a fake ``transformers`` module exposing ``AutoTokenizer``."""
    module = types.ModuleType("transformers")

    class AutoTokenizer:
        @classmethod
        def from_pretrained(cls, name: str) -> FakeHFTokenizer:
            if name.startswith("missing/"):
                msg = f"{name} is not a local folder and is not a valid model identifier"
                raise OSError(msg)
            return FakeHFTokenizer(name)

    module.AutoTokenizer = AutoTokenizer  # type: ignore[attr-defined]
    return module


@pytest.fixture
def byte_tokenizer() -> ByteTokenizer:
    return ByteTokenizer()


@pytest.fixture
def fake_tiktoken(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = make_fake_tiktoken()
    monkeypatch.setitem(sys.modules, "tiktoken", module)
    return module


@pytest.fixture
def no_tiktoken(monkeypatch: pytest.MonkeyPatch) -> None:
    # A None entry makes ``import tiktoken`` raise ImportError.
    monkeypatch.setitem(sys.modules, "tiktoken", None)


@pytest.fixture
def fake_transformers(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = make_fake_transformers()
    monkeypatch.setitem(sys.modules, "transformers", module)
    return module


@pytest.fixture
def no_transformers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "transformers", None)
