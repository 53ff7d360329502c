"""Chunker protocol for document segmentation."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Chunker(Protocol):
    """Protocol for splitting a document into ordered text chunks."""

    def chunk(self, text: str, metadata: dict[str, Any] | None = None) -> list[str]:
        """Split text into chunks.

        Parameters:
            text: The document text.
            metadata: Optional document metadata; chunkers may ignore it.

        Returns:
            The chunks in document order.
        """
        ...
