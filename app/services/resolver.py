"""
Response resolver: turn the outcome of the outbound call into the bridge result.

Pure functions, no state. A string "answer" field wins; anything else (not JSON,
not an object, missing or non-string answer) falls back to the raw body text.
"""

import json
import logging
from typing import Optional

from app.core.config import RESPONSE_FALLBACK_PREFIX, TRANSPORT_ERROR_PREFIX
from app.core.errors import TransportError
from app.services.invoker import InboundResponse

logger = logging.getLogger(__name__)


def extract_answer(text: str) -> Optional[str]:
    """Return the top-level string "answer" of a JSON object, or None."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    answer = data.get("answer")
    return answer if isinstance(answer, str) else None


def resolve_response(response: InboundResponse) -> str:
    text = response.body.decode("utf-8", errors="replace")
    answer = extract_answer(text)
    if answer is None:
        logger.info("[resolver:resolve_response] no answer field; status=%d body_len=%d", response.status, len(text))
        return RESPONSE_FALLBACK_PREFIX + text
    return answer


def resolve_transport_error(error: TransportError) -> str:
    return f"{TRANSPORT_ERROR_PREFIX}{error!r}"
