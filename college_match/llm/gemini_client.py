from __future__ import annotations

import logging

import google.generativeai as genai

from ..errors import UpstreamError, ValidationError
from .config import DEFAULT_GEMINI_CONFIG, GeminiConfig

logger = logging.getLogger(__name__)


def _is_blocked(response) -> bool:
    feedback = getattr(response, "prompt_feedback", None)
    if feedback is not None and getattr(feedback, "block_reason", None):
        return True
    return not getattr(response, "candidates", None)


def generate_text(prompt: str, config: GeminiConfig = DEFAULT_GEMINI_CONFIG) -> str:
    """
    Send ``prompt`` to Gemini and return the generated text.

    One attempt only. Raises ``UpstreamError`` when the service is not
    configured, the response was blocked, or the call failed.
    """
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt is required")
    if not config.enabled or not config.api_key:
        raise UpstreamError("AI service not configured")

    try:
        genai.configure(api_key=config.api_key)
        model = genai.GenerativeModel(config.model)
        response = model.generate_content(prompt)
    except Exception:
        logger.warning("Gemini call failed", exc_info=True)
        raise UpstreamError("AI service unavailable", status_code=503)

    if _is_blocked(response):
        logger.warning("Gemini response blocked by safety filters")
        raise UpstreamError("Response blocked by safety filters", status_code=400)

    try:
        return response.text
    except ValueError:
        # .text raises when the candidate carries no text parts (safety stop).
        logger.warning("Gemini response carried no text", exc_info=True)
        raise UpstreamError("Response blocked by safety filters", status_code=400)
