"""Shared test fixtures."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from cloudflare_mcp.config import CloudflareSettings


class FakeCloudflareClient:
    """Stand-in for :class:`CloudflareClient` returning canned envelopes."""

    def __init__(
        self,
        zones: dict[str, Any] | None = None,
        load_balancers: dict[str, Any] | None = None,
        verify: dict[str, Any] | None = None,
    ) -> None:
        self.calls: list[tuple[str, object]] = []
        self._zones = zones
        self._load_balancers = load_balancers
        self._verify = verify
        self.zones = SimpleNamespace(list=self._list_zones)
        self.load_balancers = SimpleNamespace(list=self._list_load_balancers)
        self.user = SimpleNamespace(tokens=SimpleNamespace(verify=self._verify_token))

    def _list_zones(self, filters: dict[str, Any] | None = None) -> Any:
        self.calls.append(("zones.list", filters))
        return self._zones

    def _list_load_balancers(self, zone_id: str) -> Any:
        self.calls.append(("load_balancers.list", zone_id))
        return self._load_balancers

    def _verify_token(self) -> Any:
        self.calls.append(("user.tokens.verify", None))
        return self._verify


@pytest.fixture()
def settings() -> CloudflareSettings:
    """Settings carrying a fixed 12-character token."""
    return CloudflareSettings(
        api_token="abcd1234efgh",
        api_base_url="https://cf.test/client/v4",
        _env_file=None,
    )


@pytest.fixture()
def sample_load_balancers() -> list[dict[str, Any]]:
    """Five load balancers as returned by the Cloudflare API."""
    return [
        {
            "id": f"lb{index}",
            "name": f"lb{index}.example.com",
            "enabled": index % 2 == 0,
            "default_pools": [f"pool{index}"],
            "ttl": 30,
        }
        for index in range(5)
    ]


@pytest.fixture()
def fake_client(sample_load_balancers: list[dict[str, Any]]) -> FakeCloudflareClient:
    """Client whose calls all succeed."""
    return FakeCloudflareClient(
        zones={
            "success": True,
            "errors": [],
            "result": [{"id": "z1", "name": "example.com", "status": "active"}],
        },
        load_balancers={
            "success": True,
            "errors": [],
            "result": sample_load_balancers,
        },
        verify={
            "success": True,
            "errors": [],
            "result": {"id": "tok1", "status": "active"},
        },
    )


@pytest.fixture()
def client_factory() -> type[FakeCloudflareClient]:
    """Build fake clients with custom envelopes."""
    return FakeCloudflareClient


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the backend FastMCP's client requires."""
    return "asyncio"
