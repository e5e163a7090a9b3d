"""Data models for word verification."""

from typing import Dict, Optional, Literal
from pydantic import BaseModel


RejectionCode = Literal[
    "TOO_SHORT",
    "SAME_AS_ROOT",
    "ALREADY_USED",
    "IMPOSSIBLE_LETTERS",
    "NOT_A_WORD",
]
DecisionStatus = Literal["accepted", "rejected", "empty"]


# Alert title and message shown to the player for each rejection
REJECTION_MESSAGES: Dict[str, tuple] = {
    "TOO_SHORT": ("Word too short", "Your words must be at least 3 letters!"),
    "SAME_AS_ROOT": ("Lazy answer", "You just entered the original word! Find your own!"),
    "ALREADY_USED": ("Word already used", "Give us a new word instead!"),
    "IMPOSSIBLE_LETTERS": (
        "Uses invalid letters",
        "This word uses letters that aren't found in the original!",
    ),
    "NOT_A_WORD": ("Word not possible", "English doesn't include this word. Try again!"),
}


class Rejection(BaseModel):
    """Why a candidate was turned down."""
    code: RejectionCode
    title: str
    message: str
    word: Optional[str] = None

    @classmethod
    def for_code(cls, code: RejectionCode, word: Optional[str] = None) -> "Rejection":
        title, message = REJECTION_MESSAGES[code]
        return cls(code=code, title=title, message=message, word=word)


class Decision(BaseModel):
    """Outcome of validating one candidate."""
    status: DecisionStatus
    word: str = ""  # Normalized candidate
    rejection: Optional[Rejection] = None

    @classmethod
    def accepted(cls, word: str) -> "Decision":
        return cls(status="accepted", word=word)

    @classmethod
    def rejected(cls, code: RejectionCode, word: str) -> "Decision":
        return cls(status="rejected", word=word, rejection=Rejection.for_code(code, word))

    @classmethod
    def empty(cls) -> "Decision":
        return cls(status="empty")

    @property
    def is_accepted(self) -> bool:
        return self.status == "accepted"

    @property
    def is_rejected(self) -> bool:
        return self.status == "rejected"

    @property
    def is_empty(self) -> bool:
        return self.status == "empty"

    @property
    def code(self) -> Optional[str]:
        """Rejection code, or None when the decision is not a rejection."""
        return self.rejection.code if self.rejection else None
