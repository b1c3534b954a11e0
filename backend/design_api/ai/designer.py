"""LLM client for regenerating a design's canvas from a free-text prompt."""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI, APIError

from design_api.ai.prompts import regeneration_messages
from design_api.config import get_settings

logger = logging.getLogger(__name__)


# ─── Client Factory ───


def _create_client(api_key: str) -> AsyncOpenAI:
    """Create an OpenAI-compatible async client.

    The base URL defaults to OpenRouter; any OpenAI-compatible proxy works.
    Retries are disabled, a timed-out call is a plain failure.
    """
    settings = get_settings()
    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.llm_base_url or None,
        timeout=settings.llm_timeout,
        max_retries=0,
    )


def _first_message_text(response: Any) -> str:
    """``choices[0].message.content``, or ``""`` for any other shape."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""


# ─── Core LLM Call ───


async def regenerate_canvas(
    design_json: dict[str, Any],
    prompt: str,
    api_key: str,
) -> str:
    """Ask the model for a new canvas and return its raw text.

    The output is not parsed; callers store it as-is.
    """
    settings = get_settings()
    client = _create_client(api_key)
    messages = regeneration_messages(design_json, prompt)

    logger.info("AI regeneration started (model=%s)", settings.llm_model)
    try:
        response = await client.chat.completions.create(
            model=settings.llm_model,
            messages=messages,
        )
    except APIError as e:
        logger.error("LLM API error: %s", e)
        raise
    result = _first_message_text(response)
    logger.info("AI regeneration finished, %d characters returned", len(result))
    logger.debug("AI regeneration output: %s", result)
    return result
