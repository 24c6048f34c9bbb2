from typing import Literal

from pydantic import BaseModel

from models.schemas.records import JobRecord, OptimizationRecord


class AnalysisResult(BaseModel):
    score: int = 0
    recommendations: list[str] = []
    focus_keyphrase: str | None = None
    meta_description: str | None = None
    optimized_title: str | None = None


class OptimizationResult(BaseModel):
    score: int = 0
    recommendations: list[str] = []
    focus_keyphrase: str = ""
    meta_description: str = ""
    optimized_title: str = ""
    optimized_content: str = ""


class JobOptimizationResponse(BaseModel):
    job: JobRecord
    optimization: OptimizationResult


class BatchItemResult(BaseModel):
    job_id: int
    status: Literal["success", "failed"]
    seo_score: int | None = None
    error: str | None = None


class BatchOptimizationResponse(BaseModel):
    message: str
    results: list[BatchItemResult] = []


class SyncResponse(BaseModel):
    message: str
    synced: int = 0


class DashboardStats(BaseModel):
    total_jobs: int = 0
    optimized_jobs: int = 0
    pending_jobs: int = 0
    avg_seo_score: int = 0


class ConnectionTestResponse(BaseModel):
    success: bool
    message: str


class RecentOptimization(OptimizationRecord):
    """Audit entry with the posting it belongs to, for the dashboard feed."""
    job_title: str
    company: str
