"""Tests for urlshort.fallback — the default greeting application."""

import pytest

from urlshort.config import AppConfig
from urlshort.fallback import default_mux
from urlshort.testing import TestClient


class TestDefaultMux:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/anything", "/deeply/nested/path", "/no such URL"])
    async def test_greets_every_path(self, path: str) -> None:
        async with TestClient(default_mux()) as client:
            response = await client.get(path)

        assert response.status == 200
        assert response.text == "Hello, world!"
        assert response.content_type == "text/plain; charset=utf-8"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    async def test_greets_every_method(self, method: str) -> None:
        async with TestClient(default_mux()) as client:
            response = await client.request(method, "/x")

        assert response.status == 200

    @pytest.mark.asyncio
    async def test_greeting_from_config(self) -> None:
        async with TestClient(default_mux(AppConfig(greeting="Hi there"))) as client:
            response = await client.get("/")

        assert response.text == "Hi there"

    @pytest.mark.asyncio
    async def test_head_has_no_body(self) -> None:
        async with TestClient(default_mux()) as client:
            response = await client.head("/")

        assert response.status == 200
        assert response.body_bytes == b""
