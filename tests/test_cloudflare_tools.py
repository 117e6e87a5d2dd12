"""Behavior of the client-backed Cloudflare tools."""

from __future__ import annotations

import json
from typing import Any

import pytest

from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.tools import build_tools
from cloudflare_mcp.tools.tokens import get_token_tool
from mcp_adapter.errors import ErrorKind, MCPError
from mcp_adapter.server import MCPServer


def _server(settings: CloudflareSettings, client: Any) -> MCPServer:
    return MCPServer(build_tools(settings, client))


def _run(server: MCPServer, tool_name: str, **arguments: Any) -> Any:
    return json.loads(server.run_tool(tool_name, parameters=arguments).text)


def test_registry_lists_client_backed_tools(
    settings: CloudflareSettings, fake_client: Any
) -> None:
    """All four operations are offered when a client is available."""
    server = _server(settings, fake_client)

    assert [operation["name"] for operation in server.list_operations()] == [
        "list_load_balancers",
        "get_token",
        "list_zones",
        "verify_token",
    ]
    schema = server.to_catalog()["list_load_balancers"]["input_schema"]
    assert schema["required"] == ["zone_id"]
    assert set(schema["properties"]) == {
        "zone_id",
        "load_balancer_id",
        "load_balancer_name",
        "limit",
        "offset",
        "fields",
    }


class TestListZones:
    """list_zones forwards filters and returns the remote result."""

    def test_no_filters_forwards_empty_object(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = server.run_tool("list_zones", parameters={})

        assert fake_client.calls == [("zones.list", {})]
        assert result.text == json.dumps(
            [{"id": "z1", "name": "example.com", "status": "active"}], indent=2
        )

    def test_forwards_given_filters(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        _run(server, "list_zones", name="example.com", page=2, direction="desc")

        assert fake_client.calls == [
            ("zones.list", {"name": "example.com", "page": 2, "direction": "desc"})
        ]

    def test_remote_failure_joins_error_pairs(
        self, settings: CloudflareSettings, client_factory: Any
    ) -> None:
        client = client_factory(
            zones={
                "success": False,
                "errors": [
                    {"code": 1003, "message": "bad zone"},
                    {"code": 9109, "message": "denied"},
                ],
                "result": None,
            }
        )
        server = _server(settings, client)

        result = server.dispatch("list_zones", {})

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INTERNAL_ERROR
        assert "1003: bad zone, 9109: denied" in result.error.message


class TestListLoadBalancers:
    """Selection, slicing and projection of load balancers."""

    def test_requires_zone_id(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = server.dispatch("list_load_balancers", {"limit": 2})

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INVALID_PARAMS
        assert "zone_id" in result.error.message
        assert fake_client.calls == []

    @pytest.mark.parametrize(
        "arguments",
        [
            {"zone_id": "z1"},
            {"zone_id": "z1", "limit": 0},
            {"zone_id": "z1", "limit": -3, "offset": 1},
            {"zone_id": "z1", "fields": ["id"]},
        ],
    )
    def test_requires_a_bound(
        self,
        settings: CloudflareSettings,
        fake_client: Any,
        arguments: dict[str, Any],
    ) -> None:
        server = _server(settings, fake_client)

        result = server.dispatch("list_load_balancers", arguments)

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INVALID_PARAMS
        assert "At least one of the following parameters" in result.error.message
        assert fake_client.calls == []

    def test_offset_and_limit_slice_in_order(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(server, "list_load_balancers", zone_id="z1", offset=1, limit=3)

        assert [item["id"] for item in result] == ["lb1", "lb2", "lb3"]
        assert fake_client.calls == [("load_balancers.list", "z1")]

    def test_limit_past_end_and_negative_offset(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        tail = _run(server, "list_load_balancers", zone_id="z1", offset=3, limit=10)
        head = _run(server, "list_load_balancers", zone_id="z1", offset=-2, limit=2)

        assert [item["id"] for item in tail] == ["lb3", "lb4"]
        assert [item["id"] for item in head] == ["lb0", "lb1"]

    def test_fractional_bounds_truncate(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        sliced = _run(
            server, "list_load_balancers", zone_id="z1", offset=1.5, limit=2.7
        )
        empty = _run(server, "list_load_balancers", zone_id="z1", limit=0.5)

        assert [item["id"] for item in sliced] == ["lb1", "lb2", "lb3"]
        assert empty == []

    def test_numeric_bounds_are_numbers_in_schema(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        properties = server.to_catalog()["list_load_balancers"]["input_schema"][
            "properties"
        ]

        for name in ("limit", "offset"):
            types = {option.get("type") for option in properties[name]["anyOf"]}
            assert types == {"number", "null"}

    def test_fields_project_each_item(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(
            server,
            "list_load_balancers",
            zone_id="z1",
            limit=2,
            fields=["id", "name", "missing"],
        )

        assert result == [
            {"id": "lb0", "name": "lb0.example.com"},
            {"id": "lb1", "name": "lb1.example.com"},
        ]

    def test_lookup_by_id_with_projection(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(
            server,
            "list_load_balancers",
            zone_id="z1",
            load_balancer_id="lb2",
            fields=["id", "enabled"],
        )

        assert result == {"id": "lb2", "enabled": True}

    def test_lookup_by_name(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(
            server,
            "list_load_balancers",
            zone_id="z1",
            load_balancer_name="lb4.example.com",
        )

        assert result["id"] == "lb4"
        assert result["default_pools"] == ["pool4"]

    def test_unknown_id_is_invalid_params(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = server.dispatch(
            "list_load_balancers", {"zone_id": "z1", "load_balancer_id": "nope"}
        )

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INVALID_PARAMS
        assert result.error.message == "Load balancer with ID nope not found"

    def test_remote_failure_is_internal_error(
        self, settings: CloudflareSettings, client_factory: Any
    ) -> None:
        client = client_factory(
            load_balancers={
                "success": False,
                "errors": [{"code": 1003, "message": "bad zone"}],
            }
        )
        server = _server(settings, client)

        with pytest.raises(MCPError) as error_info:
            server.run_tool(
                "list_load_balancers", parameters={"zone_id": "bad", "limit": 1}
            )

        assert error_info.value.error_type is ErrorKind.INTERNAL_ERROR
        assert "1003: bad zone" in error_info.value.message


class TestTokens:
    """get_token and verify_token."""

    def test_get_token_masks_credential(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(server, "get_token")

        assert result["token_length"] == 12
        assert result["masked_token"] == "abcd...efgh"
        assert fake_client.calls == []

    def test_get_token_without_credential(self) -> None:
        server = MCPServer([get_token_tool(None)])

        result = server.dispatch("get_token", {})

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INTERNAL_ERROR

    def test_verify_token_defaults_missing_fields(
        self, settings: CloudflareSettings, fake_client: Any
    ) -> None:
        server = _server(settings, fake_client)

        result = _run(server, "verify_token")

        assert result == {"status": "active", "id": "tok1", "permissions": []}

    @pytest.mark.parametrize(
        ("envelope", "expected"),
        [
            (None, "Empty response"),
            (
                {"success": False, "errors": [{"code": 1000, "message": "Invalid"}]},
                "API token verification failed: 1000: Invalid",
            ),
            ({"success": True, "errors": []}, "Missing result"),
        ],
    )
    def test_verify_token_failures(
        self,
        settings: CloudflareSettings,
        envelope: dict[str, Any] | None,
        expected: str,
        client_factory: Any,
    ) -> None:
        server = _server(settings, client_factory(verify=envelope))

        result = server.dispatch("verify_token", {})

        assert result.error is not None
        assert result.error.error_type is ErrorKind.INTERNAL_ERROR
        assert expected in result.error.message
