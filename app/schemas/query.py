"""Schemas for the ask_ollama endpoint."""

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Request body for POST /ask_ollama. The question is forwarded as-is, without validation."""

    question: str = Field(..., description="Free-text question for the Spicy AI agent.")


class AskResponse(BaseModel):
    """Response for POST /ask_ollama."""

    result: str = Field(
        ...,
        description="Extracted answer, or a diagnostic fallback ('Ollama response: ...' / 'Ollama HTTPS error: ...').",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [{"result": "Keep the soil pH between 6.0 and 6.8 for most chili varieties."}]
        }
    }
