# Domain Services
from .authorization_guard import AccessDecision, DenialReason, JobAuthorizationGuard

__all__ = ["AccessDecision", "DenialReason", "JobAuthorizationGuard"]
