# Use Cases Package
from .results import HiringResult, OperationResult
from .apply_to_job import ApplyToJobUseCase
from .advance_applicant import AdvanceApplicantUseCase
from .list_applicants import ListApplicantsUseCase
from .manage_jobs import BrowseJobsUseCase, DeleteJobUseCase, PostJobUseCase
from .hiring_service import HiringService

__all__ = [
    "HiringResult",
    "OperationResult",
    "ApplyToJobUseCase",
    "AdvanceApplicantUseCase",
    "ListApplicantsUseCase",
    "PostJobUseCase",
    "DeleteJobUseCase",
    "BrowseJobsUseCase",
    "HiringService",
]
