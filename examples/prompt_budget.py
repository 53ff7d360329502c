"""Example: Fitting prompts into token budgets. Run with: python examples/prompt_budget.py

Demonstrates splitting a long document into overlapping chunks, trimming a
conversation history to the most recent tokens, and running a prompt through
``generate_text`` with a stand-in completion function.

Uses the character tokenizer so it runs without tiktoken's encoding data.
"""

from __future__ import annotations

from promptfit import (
    ModelContext,
    ModelSettings,
    TokenizerConfig,
    TokenizerKind,
    generate_text,
    split_chunk_spans,
    trim_tokens,
)

CONTEXT = ModelContext(
    provider="openai",
    tokenizer=TokenizerConfig(kind=TokenizerKind.CHARACTER),
)

DOCUMENT = (
    "Context windows are finite. Long documents are split into chunks that "
    "share a little overlap so that retrieved pieces can be stitched back "
    "together without losing the sentence that straddles a boundary. "
) * 3

HISTORY = "\n".join(f"user: message number {i}\nassistant: reply {i}" for i in range(20))


# ---------------------------------------------------------------------------
# Example 1: Overlapping chunks
# ---------------------------------------------------------------------------


def show_chunks() -> None:
    print("=== Chunks (chunk_size=120, bleed=20) ===")
    for chunk in split_chunk_spans(DOCUMENT, 120, 20):
        print(f"[{chunk.index}] tokens {chunk.start}-{chunk.end}: {chunk.text[:40]!r}...")
    print()


# ---------------------------------------------------------------------------
# Example 2: Trimming history to the latest tokens
# ---------------------------------------------------------------------------


def show_trim() -> None:
    print("=== Last 80 tokens of the history ===")
    print(trim_tokens(HISTORY, 80, CONTEXT))
    print()


# ---------------------------------------------------------------------------
# Example 3: Generation with an injected completion call
# ---------------------------------------------------------------------------


def echo_completion(prompt: str, *, model: str, settings: ModelSettings) -> str:
    return f"[{model}, {len(prompt)} chars, temperature={settings.temperature}]"


def show_generation() -> None:
    print("=== generate_text with a 200-token input budget ===")
    print(generate_text(HISTORY, CONTEXT, echo_completion, max_input_tokens=200))


if __name__ == "__main__":
    show_chunks()
    show_trim()
    show_generation()
