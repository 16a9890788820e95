"""
Notification Value Objects - Outbound candidate messages and their outcome.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """
    Immutable email-style message for a candidate.

    Attributes:
        sender: From address
        recipient: Candidate email
        subject: Subject line
        body: Recruiter-written message
    """

    sender: str
    recipient: str
    subject: str
    body: str

    def __post_init__(self) -> None:
        """Validate addressing."""
        if not self.recipient:
            raise ValueError("recipient is required")
        if not self.sender:
            raise ValueError("sender is required")


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome reported by a notification dispatcher."""

    ok: bool
    reason: str = ""

    @classmethod
    def success(cls) -> "DeliveryResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "DeliveryResult":
        return cls(ok=False, reason=reason)
