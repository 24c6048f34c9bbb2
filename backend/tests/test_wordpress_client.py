import json

import httpx
import pytest

from services.wordpress_client import (
    SEO_FOCUSKW_KEY,
    SEO_METADESC_KEY,
    SEO_TITLE_KEY,
    WordPressClient,
    WordPressError,
    WordPressNotConfiguredError,
    strip_html,
    to_posting_fields,
)

WP_LISTING = {
    "id": 311,
    "title": {"rendered": "Registered Nurse"},
    "content": {"rendered": "<p>Ward nursing <strong>role</strong> in Durban.</p>"},
    "excerpt": {"rendered": ""},
    "status": "publish",
    "meta": {},
    "_company_name": "Mediclinic",
    "_job_location": "Durban",
    "_job_salary": "",
    "_yoast_wpseo_focuskw": "nurse durban",
}


def _client(handler) -> WordPressClient:
    client = WordPressClient(api_path="/wp-json/wp/v2", timeout=5, transport=httpx.MockTransport(handler))
    client.configure("https://jobs.example.co.za/", "editor", "app-pass")
    return client


@pytest.mark.asyncio
async def test_get_jobs_sends_auth_and_filters_published():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[WP_LISTING])

    jobs = await _client(handler).get_jobs()
    assert jobs == [WP_LISTING]
    request = seen[0]
    assert request.url.path == "/wp-json/wp/v2/job-listings"
    assert request.url.params["status"] == "publish"
    assert request.url.params["per_page"] == "100"
    assert request.headers["authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_update_seo_meta_writes_only_given_fields():
    bodies: list[dict] = []

    def handler(request):
        assert request.method == "PUT"
        assert request.url.path == "/wp-json/wp/v2/job-listings/311"
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"id": 311})

    await _client(handler).update_seo_meta(311, title="Nurse - Durban", focus_keyphrase="nurse durban")
    assert bodies == [{"meta": {SEO_TITLE_KEY: "Nurse - Durban", SEO_FOCUSKW_KEY: "nurse durban"}}]
    assert SEO_METADESC_KEY not in bodies[0]["meta"]


@pytest.mark.asyncio
async def test_update_job_omits_unset_fields():
    bodies: list[dict] = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"id": 311})

    await _client(handler).update_job(311, title="Nurse", content="<p>Body</p>")
    assert bodies == [{"title": "Nurse", "content": "<p>Body</p>"}]


@pytest.mark.asyncio
async def test_error_status_raises():
    client = _client(lambda request: httpx.Response(500))
    with pytest.raises(WordPressError):
        await client.get_job(311)


@pytest.mark.asyncio
async def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    with pytest.raises(WordPressError):
        await _client(handler).get_job_types()


@pytest.mark.asyncio
async def test_unconfigured_client_raises():
    client = WordPressClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))
    assert client.is_configured is False
    with pytest.raises(WordPressNotConfiguredError):
        await client.get_jobs()


@pytest.mark.asyncio
async def test_connection_check():
    ok = _client(lambda request: httpx.Response(200, json={"id": 1}))
    assert await ok.test_connection() is True

    denied = _client(lambda request: httpx.Response(401))
    assert await denied.test_connection() is False


def test_strip_html():
    assert strip_html("<p>Hello <b>world</b></p>") == "Hello world"


def test_to_posting_fields():
    fields = to_posting_fields(WP_LISTING)
    assert fields["wp_job_id"] == 311
    assert fields["title"] == "Registered Nurse"
    assert fields["description"] == "Ward nursing role in Durban."
    assert fields["company"] == "Mediclinic"
    assert fields["focus_keyphrase"] == "nurse durban"
    assert fields["status"] == "pending"


@pytest.mark.asyncio
async def test_non_json_body_raises():
    client = _client(lambda request: httpx.Response(200, text="<html>Notice: PHP deprecated</html>"))
    with pytest.raises(WordPressError, match="non-JSON"):
        await client.get_job(311)


@pytest.mark.asyncio
async def test_connection_check_fails_on_non_json_body():
    client = _client(lambda request: httpx.Response(200, text="<html>Log in</html>"))
    assert await client.test_connection() is False
