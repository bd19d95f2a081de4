"""
Unit tests for the payload encoder and request builder.
"""

import json

from app.core.config import CALL_TIME_BUDGET, MAX_RESPONSE_BYTES, OLLAMA_AGENT_URL
from app.services.payload import encode_question
from app.services.request_builder import build_request


class TestEncodeQuestion:
    """Tests for encode_question()."""

    def test_plain_question(self) -> None:
        assert encode_question("How hot is a habanero?") == b'{"question":"How hot is a habanero?"}'

    def test_empty_question(self) -> None:
        assert json.loads(encode_question("")) == {"question": ""}

    def test_quotes_are_escaped_and_round_trip(self) -> None:
        for question in ['say "hi"', '"', '""', 'a "b" c "d"', '"leading and trailing"']:
            body = encode_question(question)
            assert json.loads(body) == {"question": question}

    def test_utf8_encoded(self) -> None:
        body = encode_question("jalapeño 🌶")
        assert body == '{"question":"jalapeño 🌶"}'.encode("utf-8")
        assert json.loads(body)["question"] == "jalapeño 🌶"

    def test_backslash_and_newline_are_not_escaped(self) -> None:
        # Only quotes are escaped; these go out raw.
        assert encode_question("a\\z") == b'{"question":"a\\z"}'
        assert encode_question("line1\nline2") == b'{"question":"line1\nline2"}'


class TestBuildRequest:
    """Tests for build_request()."""

    def test_fixed_fields(self) -> None:
        request = build_request(b'{"question":"x"}')
        assert request.url == OLLAMA_AGENT_URL == "https://ollama.com/ICSPICY/SpicyAi"
        assert request.method == "POST"
        assert request.headers == (("Content-Type", "application/json"),)
        assert request.body == b'{"question":"x"}'
        assert request.response_size_cap == MAX_RESPONSE_BYTES == 2_000_000
        assert request.time_budget == CALL_TIME_BUDGET == 30.0
        assert request.response_transform is None

    def test_constant_across_calls(self) -> None:
        a = build_request(b"one")
        b = build_request(b"two")
        assert (a.url, a.method, a.headers) == (b.url, b.method, b.headers)
