from __future__ import annotations

from typing import Protocol


class HttpTransport(Protocol):
    """Issues a GET request and returns the HTTP status code.

    Implementations raise when no response could be obtained, preferably
    ``TransportError``. Any exception counts as a failed ping for the engine.
    Timeouts are the transport's responsibility.
    """

    def get(self, url: str) -> int: ...
