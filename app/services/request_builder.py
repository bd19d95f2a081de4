"""
Request builder: assemble the outbound call descriptor for the inference endpoint.
"""

from dataclasses import dataclass

from app.core.config import (
    CALL_TIME_BUDGET,
    MAX_RESPONSE_BYTES,
    OLLAMA_AGENT_URL,
    OLLAMA_HEADERS,
    OLLAMA_METHOD,
)


@dataclass(frozen=True)
class OutboundRequest:
    """Everything the invoker needs to issue one outbound call."""

    url: str
    method: str
    headers: tuple[tuple[str, str], ...]
    body: bytes
    response_size_cap: int
    time_budget: float
    response_transform: None = None  # body is never rewritten


def build_request(payload: bytes) -> OutboundRequest:
    """Wrap an encoded payload with the fixed endpoint, header and limits."""
    return OutboundRequest(
        url=OLLAMA_AGENT_URL,
        method=OLLAMA_METHOD,
        headers=OLLAMA_HEADERS,
        body=payload,
        response_size_cap=MAX_RESPONSE_BYTES,
        time_budget=CALL_TIME_BUDGET,
        response_transform=None,
    )
