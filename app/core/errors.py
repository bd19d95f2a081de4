"""
Application errors for the outbound bridge.

TransportError is raised by the call invoker when the outbound request does not
complete (timeout, connection failure, oversized response). The agent service
turns it into a diagnostic string; it never reaches the HTTP layer.
"""


class TransportError(Exception):
    """Raised when the outbound HTTPS call fails before a full response is received."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(kind, message)
