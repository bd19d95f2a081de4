"""
Payload encoder: question text -> JSON request body.

Only double quotes are escaped. Backslashes and control characters are passed
through as-is, so a question containing e.g. a raw newline yields a body that
is not valid JSON.
"""

import logging

logger = logging.getLogger(__name__)


def escape_quotes(text: str) -> str:
    return text.replace('"', '\\"')


def encode_question(question: str) -> bytes:
    """Return UTF-8 bytes of {"question":"<question with quotes escaped>"}."""
    body = '{"question":"' + escape_quotes(question) + '"}'
    logger.debug("[payload:encode_question] IN  question_len=%d OUT body_len=%d", len(question), len(body))
    return body.encode("utf-8")
