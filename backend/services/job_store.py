"""In-memory posting store: jobs, optimization audit log, runtime configuration.

Nothing is persisted across restarts. All access goes through a single
lock so the store can be shared by concurrent request handlers.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any

from config import Settings, settings as default_settings
from models.schemas.records import ConfigurationEntry, JobRecord, OptimizationRecord

logger = logging.getLogger(__name__)

# Configuration keys shared with the orchestrator and API
WP_SITE_URL = "wp_site_url"
WP_USERNAME = "wp_username"
WP_APPLICATION_PASSWORD = "wp_application_password"
WP_API_ENDPOINT = "wp_api_endpoint"
AUTO_OPTIMIZE = "auto_optimize"
OPTIMIZATION_SCHEDULE = "optimization_schedule"
BATCH_SIZE = "batch_size"


def _default_configuration(cfg: Settings) -> list[ConfigurationEntry]:
    entries = [
        ConfigurationEntry(key=WP_SITE_URL, value=cfg.wp_site_url, description="WordPress site URL"),
        ConfigurationEntry(key=WP_API_ENDPOINT, value=cfg.wp_api_path, description="WordPress REST API endpoint"),
        ConfigurationEntry(key=AUTO_OPTIMIZE, value=str(cfg.auto_optimize).lower(), description="Auto-optimize new jobs"),
        ConfigurationEntry(key=OPTIMIZATION_SCHEDULE, value=cfg.optimization_schedule, description="Optimization frequency"),
        ConfigurationEntry(key=BATCH_SIZE, value=str(cfg.batch_size), description="Optimization batch size"),
    ]
    if cfg.wp_username and cfg.wp_application_password:
        entries += [
            ConfigurationEntry(key=WP_USERNAME, value=cfg.wp_username, description="WordPress username"),
            ConfigurationEntry(
                key=WP_APPLICATION_PASSWORD,
                value=cfg.wp_application_password,
                description="WordPress application password",
            ),
        ]
    # Blank values are treated as "not configured"
    return [e for e in entries if e.value]


class JobStore:
    def __init__(self, cfg: Settings | None = None) -> None:
        self._lock = threading.Lock()
        self._jobs: dict[int, JobRecord] = {}
        self._optimizations: dict[int, OptimizationRecord] = {}
        self._configurations: dict[str, ConfigurationEntry] = {}
        self._next_job_id = 1
        self._next_optimization_id = 1

        for entry in _default_configuration(cfg or default_settings):
            self._configurations[entry.key] = entry

    # --- Jobs ---

    def get_job(self, job_id: int) -> JobRecord | None:
        with self._lock:
            return self._jobs.get(job_id)

    def get_job_by_wp_id(self, wp_job_id: int) -> JobRecord | None:
        with self._lock:
            return next((j for j in self._jobs.values() if j.wp_job_id == wp_job_id), None)

    def get_jobs(self, status: str | None = None) -> list[JobRecord]:
        with self._lock:
            jobs = list(self._jobs.values())
        if status:
            return [j for j in jobs if j.status == status]
        return jobs

    def create_job(self, **fields: Any) -> JobRecord:
        with self._lock:
            job = JobRecord(id=self._next_job_id, **fields)
            self._jobs[job.id] = job
            self._next_job_id += 1
        logger.debug("Stored job %d: %r", job.id, job.title)
        return job

    def update_job(self, job_id: int, **changes: Any) -> JobRecord | None:
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return None
            updated = job.model_copy(
                update={**changes, "updated_at": datetime.now(timezone.utc)}
            )
            self._jobs[job_id] = updated
            return updated

    def delete_job(self, job_id: int) -> bool:
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    # --- Optimizations ---

    def create_optimization(self, **fields: Any) -> OptimizationRecord:
        with self._lock:
            record = OptimizationRecord(id=self._next_optimization_id, **fields)
            self._optimizations[record.id] = record
            self._next_optimization_id += 1
            return record

    def get_optimizations_by_job_id(self, job_id: int) -> list[OptimizationRecord]:
        with self._lock:
            return [o for o in self._optimizations.values() if o.job_id == job_id]

    def get_recent_optimizations(self, limit: int = 10) -> list[OptimizationRecord]:
        """Newest first; ties on timestamp fall back to insertion order."""
        with self._lock:
            records = list(self._optimizations.values())
        records.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return records[:limit]

    # --- Configuration ---

    def get_configuration(self, key: str) -> ConfigurationEntry | None:
        with self._lock:
            return self._configurations.get(key)

    def get_configurations(self) -> list[ConfigurationEntry]:
        with self._lock:
            return list(self._configurations.values())

    def set_configuration(self, key: str, value: str, description: str | None = None) -> ConfigurationEntry:
        with self._lock:
            existing = self._configurations.get(key)
            entry = ConfigurationEntry(
                key=key,
                value=value,
                description=description if description is not None else (existing.description if existing else None),
            )
            self._configurations[key] = entry
            return entry

    def update_configuration(self, key: str, value: str) -> ConfigurationEntry | None:
        with self._lock:
            existing = self._configurations.get(key)
            if existing is None:
                return None
            entry = existing.model_copy(
                update={"value": value, "updated_at": datetime.now(timezone.utc)}
            )
            self._configurations[key] = entry
            return entry
