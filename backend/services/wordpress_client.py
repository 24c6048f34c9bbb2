"""WordPress REST API client for the job board (WP Job Manager + Yoast SEO)."""

import logging
import re
from typing import Any

import httpx

from config import settings

logger = logging.getLogger(__name__)

# Yoast SEO post meta keys
SEO_TITLE_KEY = "_yoast_wpseo_title"
SEO_METADESC_KEY = "_yoast_wpseo_metadesc"
SEO_FOCUSKW_KEY = "_yoast_wpseo_focuskw"

_TAG_RE = re.compile(r"<[^>]*>")


class WordPressError(Exception):
    """Raised when the WordPress API is unreachable, unconfigured or rejects a call."""


class WordPressNotConfiguredError(WordPressError):
    pass


class WordPressClient:
    def __init__(
        self,
        api_path: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_path = api_path if api_path is not None else settings.wp_api_path
        self.timeout = timeout if timeout is not None else settings.wp_timeout_seconds
        self._transport = transport
        self._auth: httpx.BasicAuth | None = None
        self.base_url = ""

    @property
    def is_configured(self) -> bool:
        return self._auth is not None

    def configure(self, site_url: str, username: str, application_password: str) -> None:
        self.base_url = f"{site_url.rstrip('/')}{self.api_path}"
        self._auth = httpx.BasicAuth(username, application_password)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        if self._auth is None:
            raise WordPressNotConfiguredError("WordPress credentials not configured")

        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                auth=self._auth, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise WordPressError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise WordPressError(
                f"{method} {path} failed: {response.status_code} {response.reason_phrase}"
            )
        try:
            return response.json()
        except ValueError as e:
            # HTML login pages or PHP notices ahead of the payload
            raise WordPressError(f"{method} {path} returned a non-JSON body: {e}") from e

    async def test_connection(self) -> bool:
        try:
            await self._request("GET", "/users/me")
            return True
        except WordPressError as e:
            logger.error("WordPress connection test failed: %s", e)
            return False

    async def get_jobs(self, page: int = 1, per_page: int = 100) -> list[dict]:
        return await self._request(
            "GET",
            "/job-listings",
            params={"page": page, "per_page": per_page, "status": "publish"},
        )

    async def get_job(self, wp_job_id: int) -> dict:
        return await self._request("GET", f"/job-listings/{wp_job_id}")

    async def update_job(
        self,
        wp_job_id: int,
        title: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict:
        body = {
            key: value
            for key, value in (("title", title), ("content", content), ("excerpt", excerpt), ("meta", meta))
            if value is not None
        }
        return await self._request("PUT", f"/job-listings/{wp_job_id}", json=body)

    async def update_job_meta(self, wp_job_id: int, meta: dict[str, Any]) -> dict:
        return await self.update_job(wp_job_id, meta=meta)

    async def update_seo_meta(
        self,
        wp_job_id: int,
        title: str | None = None,
        meta_description: str | None = None,
        focus_keyphrase: str | None = None,
    ) -> dict:
        """Write only the SEO fields that have a value."""
        meta: dict[str, str] = {}
        if title:
            meta[SEO_TITLE_KEY] = title
        if meta_description:
            meta[SEO_METADESC_KEY] = meta_description
        if focus_keyphrase:
            meta[SEO_FOCUSKW_KEY] = focus_keyphrase
        return await self.update_job_meta(wp_job_id, meta)

    async def get_job_categories(self) -> list[dict]:
        return await self._request("GET", "/job_listing_category")

    async def get_job_types(self) -> list[dict]:
        return await self._request("GET", "/job_listing_type")


def strip_html(html: str) -> str:
    return _TAG_RE.sub("", html)


def to_posting_fields(wp_job: dict) -> dict[str, Any]:
    """Map a job-listing payload to JobRecord fields for a new pending job."""
    return {
        "wp_job_id": wp_job["id"],
        "title": (wp_job.get("title") or {}).get("rendered", ""),
        "description": strip_html((wp_job.get("content") or {}).get("rendered", "")),
        "company": wp_job.get("_company_name"),
        "location": wp_job.get("_job_location"),
        "salary": wp_job.get("_job_salary"),
        "focus_keyphrase": wp_job.get(SEO_FOCUSKW_KEY),
        "meta_description": wp_job.get(SEO_METADESC_KEY),
        "status": "pending",
    }
