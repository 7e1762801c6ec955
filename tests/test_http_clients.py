"""Tests for HTTP-based adapters."""

import asyncio

import httpx

from custody_scan.adapters.qr_label_client import HttpxLabelClient


def test_label_client_requests_qr_for_job() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"\x89PNG-label")

    client = HttpxLabelClient(
        base_url="https://qr.example/v1/create-qr-code/",
        size=150,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    content = asyncio.run(client.fetch_label("JOB-KL-001"))

    assert content == b"\x89PNG-label"
    assert seen[0].url.params["data"] == "JOB-KL-001"
    assert seen[0].url.params["size"] == "150x150"
    asyncio.run(client.close())


def test_label_client_raises_on_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    client = HttpxLabelClient(
        base_url="https://qr.example/",
        size=300,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    try:
        asyncio.run(client.fetch_label("JOB-KL-001"))
    except httpx.HTTPStatusError as exc:
        assert exc.response.status_code == 503
    else:
        raise AssertionError("Expected HTTPStatusError")
