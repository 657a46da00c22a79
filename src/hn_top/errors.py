from __future__ import annotations
from typing import Optional


class HNTopError(Exception):
    """Base class for errors raised by hn_top."""


class FetchError(HNTopError):
    """A fetch round failed. The run is retried as a whole, never the round."""


class TransportError(FetchError):
    def __init__(self, message: str, *, req_id: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.req_id = req_id
        self.status = status


class ParseError(FetchError):
    def __init__(self, message: str, *, snippet: str = ""):
        super().__init__(message)
        self.snippet = snippet
