"""HireFlow - job posting and hiring workflow service."""

__version__ = "0.1.0"
