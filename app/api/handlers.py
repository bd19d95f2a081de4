"""
API handlers: read request data, call services, map results to response models.

Responsibility: Bridge HTTP types and services. The bridge never fails at the
HTTP level: transport and parsing problems come back inside AskResponse.result.
"""

from app.schemas.query import AskRequest, AskResponse
from app.services.agent_service import ask_ollama


async def handle_ask(body: AskRequest) -> AskResponse:
    """Run one bridge call for the request's question."""
    result = await ask_ollama(body.question)
    return AskResponse(result=result)
