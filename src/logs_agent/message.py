"""
Message container handed between log readers and the forwarder.
"""


class Message:
    """Holds the raw bytes of a single log line."""

    def __init__(self, content: bytes):
        self._content = content

    @property
    def content(self) -> bytes:
        return self._content

    def set_content(self, content: bytes) -> None:
        self._content = content

    def __repr__(self) -> str:
        return f"Message(content={self._content!r})"
