"""Shared dependencies for API routes."""

from functools import lru_cache

from fastapi import Depends

from services.job_optimizer import JobOptimizer
from services.job_store import JobStore
from services.wordpress_client import WordPressClient


@lru_cache
def get_job_store() -> JobStore:
    return JobStore()


def get_wordpress_client() -> WordPressClient:
    return WordPressClient()


def get_job_optimizer(
    store: JobStore = Depends(get_job_store),
    wordpress: WordPressClient = Depends(get_wordpress_client),
) -> JobOptimizer:
    return JobOptimizer(store, wordpress)
