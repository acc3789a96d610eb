from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    BAD_CARD = "BadCard"
    PARSE_ERROR = "ParseError"
    BAD_HAND = "BadHand"
    BAD_COUNT = "BadCount"


class CribbageError(Exception):
    """Base error for every engine failure. Carries a kind the service can report."""

    kind = ErrorKind.BAD_CARD

    def __init__(self, msg: str, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(msg)
        if kind is not None:
            self.kind = kind
        self.message = msg

    def payload(self) -> Dict[str, str]:
        return {"error_kind": self.kind.value, "message": self.message}


class ParseError(CribbageError, ValueError):
    kind = ErrorKind.PARSE_ERROR

    def __init__(self, msg: str, token: str) -> None:
        super().__init__(msg)
        self.token = token


class BadHandError(CribbageError, ValueError):
    kind = ErrorKind.BAD_HAND


class CountExceededError(CribbageError, ValueError):
    kind = ErrorKind.BAD_COUNT


class BadCardError(CribbageError, IndexError):
    kind = ErrorKind.BAD_CARD
