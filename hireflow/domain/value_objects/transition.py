"""
Transition Value Object - A recruiter-driven move along the pipeline.
"""

from dataclasses import dataclass

from hireflow.domain.entities import ApplicationStatus


@dataclass(frozen=True)
class Transition:
    """
    Immutable description of one legal status move.

    Attributes:
        name: Operation name used in logs
        source: Status the entry must currently hold
        target: Status written on success
        subject: Notification subject; may contain ``str.format`` fields
    """

    name: str
    source: ApplicationStatus
    target: ApplicationStatus
    subject: str

    def __post_init__(self) -> None:
        """Reject moves that are not in the transition table."""
        if not self.source.can_transition_to(self.target):
            raise ValueError(
                f"{self.source.value} -> {self.target.value} is not a legal transition"
            )

    def render_subject(self, **context: str) -> str:
        """Fill the subject template with ``context``."""
        return self.subject.format(**context)


SCHEDULE_INTERVIEW = Transition(
    name="schedule_interview",
    source=ApplicationStatus.APPLIED,
    target=ApplicationStatus.INTERVIEWING,
    subject="Scheduled Interview on {date} at {time}",
)

SEND_OFFER = Transition(
    name="send_offer",
    source=ApplicationStatus.INTERVIEWING,
    target=ApplicationStatus.HIRED,
    subject="Offer Letter",
)

SEND_REGRET = Transition(
    name="send_regret",
    source=ApplicationStatus.INTERVIEWING,
    target=ApplicationStatus.REJECTED,
    subject="Regret Letter",
)
