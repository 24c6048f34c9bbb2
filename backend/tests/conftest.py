"""Shared test configuration, pytest markers and posting fixtures."""

import pytest

from config import Settings
from models.schemas.job_posting import JobPosting


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the store, orchestrator and API together"
    )


FULL_DESCRIPTION = (
    "Our hospital is looking for a registered nurse to join the surgical ward. "
    "The nurse will provide patient care, administer medication and support "
    "doctors during rounds. Nursing experience in a hospital setting is essential."
)


@pytest.fixture
def full_posting() -> JobPosting:
    """A posting with every optional field filled in."""
    return JobPosting(
        title="Registered Nurse - Cape Town",
        description=FULL_DESCRIPTION,
        company="Mediclinic",
        location="Cape Town",
        job_type="full-time",
        category="Healthcare",
        salary="R25 000 per month",
        focus_keyphrase="registered nurse cape town",
        meta_description="Registered nurse vacancy at Mediclinic in Cape Town.",
    )


@pytest.fixture
def wp_settings() -> Settings:
    return Settings(
        wp_site_url="https://jobs.example.co.za",
        wp_username="editor",
        wp_application_password="app-pass",
        batch_size=10,
    )


@pytest.fixture
def bare_settings() -> Settings:
    return Settings(wp_site_url="", wp_username="", wp_application_password="")
