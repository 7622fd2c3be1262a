"""Error taxonomy shared by the engine and the host.

Every error carries a short machine-readable ``code`` alongside the message so
the host can turn it into an error frame without inspecting types twice.
"""

from __future__ import annotations

from typing import Optional


class StudError(Exception):
    code = "STUD_ERROR"

    def __init__(self, msg: str, code: Optional[str] = None) -> None:
        super().__init__(msg)
        self.msg = msg
        if code is not None:
            self.code = code


class InvalidInput(StudError, ValueError):
    """The player list is missing, empty, or holds unusable names."""

    code = "INVALID_INPUT"


class InsufficientCards(StudError, ValueError):
    """More cards were requested than the deck can supply."""

    code = "INSUFFICIENT_CARDS"


class InvalidHand(StudError):
    """A hand reached the classifier with the wrong number of cards."""

    code = "INVALID_HAND"


class EvaluationFailure(StudError):
    code = "EVALUATION_FAILURE"
