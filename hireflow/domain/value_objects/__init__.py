# Domain Value Objects
from .authenticated_user import AuthenticatedUser
from .candidate_profile import ApplicantView, CandidateProfile
from .notification import DeliveryResult, Notification
from .transition import SCHEDULE_INTERVIEW, SEND_OFFER, SEND_REGRET, Transition

__all__ = [
    "AuthenticatedUser",
    "ApplicantView",
    "CandidateProfile",
    "DeliveryResult",
    "Notification",
    "Transition",
    "SCHEDULE_INTERVIEW",
    "SEND_OFFER",
    "SEND_REGRET",
]
