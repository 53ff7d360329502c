"""Prompt preparation around an injected completion call.

Nothing here talks to a provider: callers pass a :class:`CompletionFn`
(or :class:`AsyncCompletionFn`) that performs the actual request.  These
helpers resolve the model and settings for a :class:`ModelContext`, trim
the prompt to the provider's input budget and interpret the response.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from promptfit.exceptions import GenerationError, InvalidArgumentError
from promptfit.models.context import ModelContext
from promptfit.models.settings import ModelSettings, get_provider_config, resolve_model_name
from promptfit.text.trimming import atrim_tokens, trim_tokens

logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"yes", "y", "true", "t", "on", "1", "enable", "enabled"})
_FALSE_WORDS = frozenset({"no", "n", "false", "f", "off", "0", "disable", "disabled"})
_WORD_RE = re.compile(r"[a-z0-9]+")


class CompletionFn(Protocol):
    """Synchronous completion call: prompt in, generated text out."""

    def __call__(self, prompt: str, *, model: str, settings: ModelSettings) -> str: ...


class AsyncCompletionFn(Protocol):
    """Asynchronous completion call: prompt in, generated text out."""

    async def __call__(self, prompt: str, *, model: str, settings: ModelSettings) -> str: ...


def _resolve(
    context: ModelContext, max_input_tokens: int | None
) -> tuple[str, ModelSettings, int]:
    config = get_provider_config(context.provider)
    model = resolve_model_name(context)
    budget = max_input_tokens or config.settings.max_input_tokens
    return model, config.settings, budget


def generate_text(
    prompt: str,
    context: ModelContext,
    complete: CompletionFn,
    *,
    max_input_tokens: int | None = None,
) -> str:
    """Trim ``prompt`` to the input budget and run ``complete`` on it.

    Parameters:
        prompt: The full prompt.  An empty prompt returns ``""`` without
            calling ``complete``.
        context: The model configuration to run against.
        complete: The completion call.
        max_input_tokens: Overrides the provider's ``max_input_tokens``.

    Returns:
        The completion text.

    Raises:
        ConfigurationError: If the context's provider is not in the table.
    """
    if not prompt:
        return ""
    model, settings, budget = _resolve(context, max_input_tokens)
    trimmed = trim_tokens(prompt, budget, context)
    logger.info("Generating text with %s model %s", context.provider, model)
    return complete(trimmed, model=model, settings=settings)


async def agenerate_text(
    prompt: str,
    context: ModelContext,
    complete: AsyncCompletionFn,
    *,
    max_input_tokens: int | None = None,
) -> str:
    """Async variant of :func:`generate_text`."""
    if not prompt:
        return ""
    model, settings, budget = _resolve(context, max_input_tokens)
    trimmed = await atrim_tokens(prompt, budget, context)
    logger.info("Generating text with %s model %s", context.provider, model)
    return await complete(trimmed, model=model, settings=settings)


def parse_boolean(text: str) -> bool | None:
    """Interpret the first word of ``text`` as a yes/no answer.

    Returns ``None`` when the first word is not a recognised answer.
    """
    match = _WORD_RE.search(text.lower())
    if match is None:
        return None
    word = match.group()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def generate_true_or_false(
    prompt: str,
    context: ModelContext,
    complete: CompletionFn,
    *,
    max_attempts: int = 3,
) -> bool:
    """Ask for a yes/no answer, retrying until the response parses.

    Generation stops at the first newline so that the answer is a single
    line.  Unlike :func:`generate_text`, an empty prompt is still sent:
    there is no neutral yes/no answer to return without asking.

    Raises:
        GenerationError: If no attempt produced a parseable answer.
    """
    if max_attempts < 1:
        msg = f"max_attempts must be positive, got {max_attempts}"
        raise InvalidArgumentError(msg)
    model, settings, budget = _resolve(context, None)
    settings = settings.model_copy(update={"stop": ("\n",)})
    trimmed = trim_tokens(prompt, budget, context)

    response = ""
    for attempt in range(1, max_attempts + 1):
        response = complete(trimmed, model=model, settings=settings)
        answer = parse_boolean(response)
        if answer is not None:
            return answer
        logger.warning(
            "Unparseable yes/no response on attempt %d/%d: %r", attempt, max_attempts, response
        )
    msg = f"No yes/no answer after {max_attempts} attempts (last response: {response!r})"
    raise GenerationError(msg)
