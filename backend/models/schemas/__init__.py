"""Pydantic contracts shared by the SEO engine and its collaborators."""

from models.schemas.content_sections import ContentSections
from models.schemas.job_posting import JobPosting
from models.schemas.keyword_candidate import KeywordCandidate
from models.schemas.records import ConfigurationEntry, JobRecord, OptimizationRecord

__all__ = [
    "ContentSections",
    "JobPosting",
    "KeywordCandidate",
    "ConfigurationEntry",
    "JobRecord",
    "OptimizationRecord",
]
