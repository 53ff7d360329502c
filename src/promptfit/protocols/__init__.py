"""Protocol definitions for promptfit's pluggable architecture."""

from .ingestion import Chunker
from .tokenizer import Tokenizer

__all__ = ["Chunker", "Tokenizer"]
