"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

import logging

from fastapi import APIRouter

from app.api.handlers import handle_ask
from app.schemas.query import AskRequest, AskResponse
from app.schemas.service import ServiceMethod
from app.services.agent_service import greet

logger = logging.getLogger(__name__)
router = APIRouter()

# Exported interface, published at GET /interface
SERVICE_METHODS = [
    ServiceMethod(name="greet", kind="query", args=[], returns="text", path="/greet"),
    ServiceMethod(name="ask_ollama", kind="update", args=["text"], returns="text", path="/ask_ollama"),
]


# --- System ---

@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


@router.get("/interface", tags=["system"], summary="List exported agent methods")
def get_interface() -> dict[str, list[ServiceMethod]]:
    return {"methods": SERVICE_METHODS}


# --- Agent ---

@router.get(
    "/greet",
    tags=["agent"],
    summary="Static liveness greeting",
    description="Query method: always returns the same greeting string, no outbound call.",
)
def get_greet() -> str:
    return greet()


@router.post(
    "/ask_ollama",
    response_model=AskResponse,
    tags=["agent"],
    summary="Ask the Spicy AI agent",
    description="Forward the question to the external inference endpoint. Always 200: failures are reported in 'result' with an 'Ollama response:' or 'Ollama HTTPS error:' prefix.",
)
async def post_ask_ollama(body: AskRequest) -> AskResponse:
    logger.info("[api:post_ask_ollama] IN  question=%r", body.question)
    response = await handle_ask(body)
    logger.info("[api:post_ask_ollama] OUT result_len=%d", len(response.result))
    return response
