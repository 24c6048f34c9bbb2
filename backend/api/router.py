from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_optimizer, get_job_store
from config import settings
from models.requests import (
    ConfigurationRequest,
    ConfigurationUpdateRequest,
    WordPressCredentialsRequest,
)
from models.responses import (
    AnalysisResult,
    BatchOptimizationResponse,
    ConnectionTestResponse,
    DashboardStats,
    JobOptimizationResponse,
    OptimizationResult,
    RecentOptimization,
    SyncResponse,
)
from models.schemas.job_posting import JobPosting
from models.schemas.records import ConfigurationEntry, JobRecord
from services import seo_analyzer
from services.job_optimizer import JobNotFoundError, JobOptimizer
from services.job_store import JobStore
from services.wordpress_client import WordPressError, WordPressNotConfiguredError

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "wordpress_configured": bool(settings.wp_site_url and settings.wp_username),
    }


# --- Stateless engine endpoints ---

@router.post("/seo/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, posting: JobPosting):
    return seo_analyzer.analyze(posting)


@router.post("/seo/optimize", response_model=OptimizationResult)
@limiter.limit(settings.rate_limit)
async def optimize(request: Request, posting: JobPosting):
    return seo_analyzer.optimize(posting)


# --- Jobs ---

@router.get("/jobs", response_model=list[JobRecord])
async def list_jobs(status: str | None = None, store: JobStore = Depends(get_job_store)):
    return store.get_jobs(status)


@router.post("/jobs/sync", response_model=SyncResponse)
async def sync_jobs(optimizer: JobOptimizer = Depends(get_job_optimizer)):
    try:
        synced = await optimizer.sync_jobs()
    except WordPressNotConfiguredError:
        raise HTTPException(status_code=400, detail="WordPress credentials not configured")
    except WordPressError as e:
        raise HTTPException(status_code=502, detail=f"Failed to sync jobs from WordPress: {e}")
    return SyncResponse(message=f"Synced {synced} new jobs from WordPress", synced=synced)


@router.post("/jobs/optimize-all", response_model=BatchOptimizationResponse)
async def optimize_all(optimizer: JobOptimizer = Depends(get_job_optimizer)):
    results = optimizer.optimize_pending()
    return BatchOptimizationResponse(message=f"Processed {len(results)} jobs", results=results)


@router.get("/jobs/{job_id}", response_model=JobRecord)
async def get_job(job_id: int, store: JobStore = Depends(get_job_store)):
    job = store.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/jobs/{job_id}/optimize", response_model=JobOptimizationResponse)
async def optimize_job(job_id: int, optimizer: JobOptimizer = Depends(get_job_optimizer)):
    try:
        return await optimizer.optimize_job(job_id)
    except JobNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")


@router.get("/optimizations/recent", response_model=list[RecentOptimization])
async def recent_optimizations(
    limit: int = Query(10, ge=1), optimizer: JobOptimizer = Depends(get_job_optimizer)
):
    return optimizer.recent_optimizations(limit)


@router.get("/dashboard/stats", response_model=DashboardStats)
async def dashboard_stats(optimizer: JobOptimizer = Depends(get_job_optimizer)):
    return optimizer.dashboard_stats()


# --- Configuration ---

@router.get("/config", response_model=list[ConfigurationEntry])
async def list_configuration(store: JobStore = Depends(get_job_store)):
    return store.get_configurations()


@router.post("/config", response_model=ConfigurationEntry)
async def set_configuration(body: ConfigurationRequest, store: JobStore = Depends(get_job_store)):
    return store.set_configuration(body.key, body.value, body.description)


@router.put("/config/{key}", response_model=ConfigurationEntry)
async def update_configuration(
    key: str, body: ConfigurationUpdateRequest, store: JobStore = Depends(get_job_store)
):
    entry = store.update_configuration(key, body.value)
    if entry is None:
        raise HTTPException(status_code=404, detail="Configuration not found")
    return entry


@router.post("/wordpress/test", response_model=ConnectionTestResponse)
async def test_wordpress(
    body: WordPressCredentialsRequest, optimizer: JobOptimizer = Depends(get_job_optimizer)
):
    connected = await optimizer.test_wordpress_connection(
        body.site_url, body.username, body.application_password
    )
    if not connected:
        raise HTTPException(status_code=400, detail="WordPress connection failed")
    return ConnectionTestResponse(success=True, message="WordPress connection successful")
