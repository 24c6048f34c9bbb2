"""Orchestration around the SEO engine: sync, optimize, record, publish.

Flow for a single job:
    store.get_job -> seo_analyzer.optimize -> store.update_job
      -> store.create_optimization -> WordPress push (best effort)

The WordPress push is secondary: when it fails the error is logged and
the optimize-and-record result is still returned.
"""

import logging
from datetime import datetime, timezone

from config import settings
from models.responses import (
    BatchItemResult,
    DashboardStats,
    JobOptimizationResponse,
    OptimizationResult,
    RecentOptimization,
)
from models.schemas.records import JobRecord
from services import job_store, seo_analyzer
from services.job_store import JobStore
from services.wordpress_client import (
    WordPressClient,
    WordPressError,
    WordPressNotConfiguredError,
    to_posting_fields,
)

logger = logging.getLogger(__name__)

UNKNOWN_JOB = "Unknown Job"
UNKNOWN_COMPANY = "Unknown Company"


class JobNotFoundError(LookupError):
    pass


class JobOptimizer:
    def __init__(self, store: JobStore, wordpress: WordPressClient) -> None:
        self.store = store
        self.wordpress = wordpress

    def _configure_wordpress(self) -> bool:
        """Load credentials from the configuration store. False if incomplete."""
        site_url = self.store.get_configuration(job_store.WP_SITE_URL)
        username = self.store.get_configuration(job_store.WP_USERNAME)
        password = self.store.get_configuration(job_store.WP_APPLICATION_PASSWORD)
        if not (site_url and username and password):
            return False
        api_endpoint = self.store.get_configuration(job_store.WP_API_ENDPOINT)
        if api_endpoint:
            self.wordpress.api_path = api_endpoint.value
        self.wordpress.configure(site_url.value, username.value, password.value)
        return True

    def _batch_size(self) -> int:
        entry = self.store.get_configuration(job_store.BATCH_SIZE)
        try:
            return int(entry.value) if entry else settings.batch_size
        except ValueError:
            logger.warning("Invalid batch_size %r, using %d", entry.value, settings.batch_size)
            return settings.batch_size

    async def sync_jobs(self) -> int:
        """Create pending jobs for published listings not yet in the store."""
        if not self._configure_wordpress():
            raise WordPressNotConfiguredError("WordPress credentials not configured")

        synced = 0
        for wp_job in await self.wordpress.get_jobs():
            if self.store.get_job_by_wp_id(wp_job["id"]) is not None:
                continue
            self.store.create_job(**to_posting_fields(wp_job))
            synced += 1

        logger.info("Synced %d new jobs from WordPress", synced)
        return synced

    def _record(self, job: JobRecord, optimization: OptimizationResult, rewrite_body: bool) -> JobRecord:
        changes = {
            "title": optimization.optimized_title,
            "focus_keyphrase": optimization.focus_keyphrase,
            "meta_description": optimization.meta_description,
            "seo_score": optimization.score,
            "status": "optimized",
            "optimized_at": datetime.now(timezone.utc),
        }
        if rewrite_body:
            changes["description"] = optimization.optimized_content
        updated = self.store.update_job(job.id, **changes)

        self.store.create_optimization(
            job_id=job.id,
            type="seo",
            original_value=job.title,
            optimized_value=optimization.optimized_title,
            improvements=", ".join(optimization.recommendations),
            seo_score_before=job.seo_score or 0,
            seo_score_after=optimization.score,
            status="completed",
        )
        return updated

    async def _publish(self, job: JobRecord, optimization: OptimizationResult) -> None:
        if job.wp_job_id is None:
            logger.warning("Job %d has no WordPress id, skipping publish", job.id)
            return
        if not self._configure_wordpress():
            logger.warning("WordPress credentials not configured, skipping publish of job %d", job.id)
            return

        try:
            await self.wordpress.update_job(
                job.wp_job_id,
                title=optimization.optimized_title,
                content=optimization.optimized_content,
            )
            await self.wordpress.update_seo_meta(
                job.wp_job_id,
                title=optimization.optimized_title,
                meta_description=optimization.meta_description,
                focus_keyphrase=optimization.focus_keyphrase,
            )
        except WordPressError as e:
            logger.error("WordPress update failed for job %d: %s", job.id, e)

    async def optimize_job(self, job_id: int) -> JobOptimizationResponse:
        job = self.store.get_job(job_id)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")

        optimization = seo_analyzer.optimize(job)
        updated = self._record(job, optimization, rewrite_body=True)
        logger.info("Optimized job %d: score %s -> %d", job.id, job.seo_score, optimization.score)

        await self._publish(job, optimization)
        return JobOptimizationResponse(job=updated, optimization=optimization)

    def optimize_pending(self) -> list[BatchItemResult]:
        """Optimize up to batch_size pending jobs. Failures do not stop the batch."""
        pending = self.store.get_jobs("pending")[: self._batch_size()]
        results: list[BatchItemResult] = []

        for job in pending:
            try:
                optimization = seo_analyzer.optimize(job)
                self._record(job, optimization, rewrite_body=False)
            except Exception as e:
                logger.error("Error optimizing job %d: %s", job.id, e)
                self.store.update_job(job.id, status="failed")
                results.append(BatchItemResult(job_id=job.id, status="failed", error=str(e)))
                continue
            results.append(BatchItemResult(job_id=job.id, status="success", seo_score=optimization.score))

        logger.info("Processed %d jobs from the optimization queue", len(results))
        return results

    def recent_optimizations(self, limit: int = 10) -> list[RecentOptimization]:
        """Newest audit entries, each tagged with its posting's title and company."""
        recent = []
        for record in self.store.get_recent_optimizations(limit):
            job = self.store.get_job(record.job_id)
            recent.append(RecentOptimization(
                **record.model_dump(),
                job_title=(job.title if job else None) or UNKNOWN_JOB,
                company=(job.company if job else None) or UNKNOWN_COMPANY,
            ))
        return recent

    def dashboard_stats(self) -> DashboardStats:
        jobs = self.store.get_jobs()
        optimized = [j for j in jobs if j.status == "optimized"]
        scores = [j.seo_score for j in optimized if j.seo_score is not None]
        return DashboardStats(
            total_jobs=len(jobs),
            optimized_jobs=len(optimized),
            pending_jobs=sum(1 for j in jobs if j.status == "pending"),
            avg_seo_score=round(sum(scores) / len(scores)) if scores else 0,
        )

    async def test_wordpress_connection(self, site_url: str, username: str, application_password: str) -> bool:
        """Check credentials and save them to the configuration store on success."""
        self.wordpress.configure(site_url, username, application_password)
        if not await self.wordpress.test_connection():
            return False

        self.store.set_configuration(job_store.WP_SITE_URL, site_url, "WordPress site URL")
        self.store.set_configuration(job_store.WP_USERNAME, username, "WordPress username")
        self.store.set_configuration(
            job_store.WP_APPLICATION_PASSWORD, application_password, "WordPress application password"
        )
        return True
