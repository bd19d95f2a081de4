"""
Agent service: the two exported entry points of the Spicy AI agent.

Responsibility: greet() is a static liveness answer; ask_ollama() runs the bridge
encode -> build -> submit -> resolve. Called by the API; no HTTP types here.
Every failure is returned as a diagnostic string, never raised.
"""

import logging
from typing import Optional

import httpx

from app.core.config import GREETING
from app.core.errors import TransportError
from app.services.invoker import submit
from app.services.payload import encode_question
from app.services.request_builder import build_request
from app.services.resolver import resolve_response, resolve_transport_error

logger = logging.getLogger(__name__)


def greet() -> str:
    return GREETING


async def ask_ollama(question: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Forward question to the inference endpoint; return its answer or a fallback string."""
    logger.info("[agent_service:ask_ollama] IN  question_len=%d", len(question))
    request = build_request(encode_question(question))
    try:
        response = await submit(request, client=client)
    except TransportError as e:
        logger.warning("[agent_service:ask_ollama] transport failure kind=%s: %s", e.kind, e.message)
        return resolve_transport_error(e)
    result = resolve_response(response)
    logger.info("[agent_service:ask_ollama] OUT result_len=%d", len(result))
    return result
