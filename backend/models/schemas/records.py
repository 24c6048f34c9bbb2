"""Records kept by the posting store collaborator."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.job_posting import JobPosting

JobStatus = Literal["pending", "optimized", "failed"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobRecord(JobPosting):
    """A stored posting with its optimization lifecycle state."""
    id: int
    status: JobStatus = "pending"
    optimized_at: datetime | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class OptimizationRecord(BaseModel):
    """Audit entry written after each optimize run."""
    id: int
    job_id: int
    type: str = "seo"  # title, description, seo, category
    original_value: str | None = None
    optimized_value: str
    improvements: str | None = None
    seo_score_before: int | None = None
    seo_score_after: int | None = None
    status: Literal["completed", "failed"] = "completed"
    created_at: datetime = Field(default_factory=_utcnow)


class ConfigurationEntry(BaseModel):
    key: str
    value: str
    description: str | None = None
    updated_at: datetime = Field(default_factory=_utcnow)
