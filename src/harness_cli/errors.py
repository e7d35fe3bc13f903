from __future__ import annotations
from typing import Any, Optional

class HarnessError(Exception):
    """Base error for harness-cli."""

class InvalidArgumentError(HarnessError):
    pass

class TransportError(HarnessError):
    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(f"Transport error: {message}")
        self.url = url

class DecodeError(HarnessError):
    def __init__(self, message: str, *, body: Optional[Any] = None) -> None:
        super().__init__(f"Unable to decode response: {message}")
        self.body = body
