"""Chunk model produced by the token splitter."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Chunk(BaseModel):
    """One window of a split document.

    ``start`` and ``end`` are half-open token offsets into the encoded
    source text, so adjacent chunks overlap by ``previous.end - next.start``
    tokens.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_span(self) -> Self:
        if self.end < self.start:
            msg = f"Chunk end ({self.end}) precedes start ({self.start})"
            raise ValueError(msg)
        return self

    @property
    def token_count(self) -> int:
        """Number of tokens covered by this chunk."""
        return self.end - self.start
