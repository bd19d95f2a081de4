"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading and app-wide constants. The bridge
itself reads no environment; only logging is tunable from the environment.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Logging (ambient only; the bridge does not read env)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# Static greeting returned by GET /greet
GREETING: str = "Ollama Spicy AI agent is live!"

# External inference endpoint (fixed, unauthenticated)
OLLAMA_AGENT_URL: str = "https://ollama.com/ICSPICY/SpicyAi"
OLLAMA_METHOD: str = "POST"
OLLAMA_HEADERS: tuple[tuple[str, str], ...] = (("Content-Type", "application/json"),)

# Outbound call limits
MAX_RESPONSE_BYTES: int = 2_000_000
CALL_TIME_BUDGET: float = 30.0  # seconds, whole call

# Result prefixes for the fallback strings
RESPONSE_FALLBACK_PREFIX: str = "Ollama response: "
TRANSPORT_ERROR_PREFIX: str = "Ollama HTTPS error: "
