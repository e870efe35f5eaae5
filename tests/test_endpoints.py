"""EndpointRegistry のテスト"""
from __future__ import annotations

import pytest

from wargamingApi.base.errors import UnknownOperationError
from wargamingApi.endpoints import EndpointRegistry, registry

TANKS_OPERATIONS = [
    "account.list", "account.info",
    "clans.list", "clans.info", "clans.membersinfo", "clans.glossary",
    "clans.messageboard", "clans.memberhistory",
    "wgtv.wgs", "wgtv.videos", "wgtv.vehicles",
    "servers.info",
]


class TestLookup:
    @pytest.mark.parametrize("operation", TANKS_OPERATIONS)
    def test_every_tanks_operation_resolves(self, operation):
        path = registry.lookup("tanks", operation)
        assert path is not None
        assert path.startswith("wgn/")
        assert path.endswith("/")

    def test_account_info_path(self):
        assert registry.lookup("tanks", "account.info") == "wgn/account/info/"

    def test_lookup_is_pure(self):
        first = registry.lookup("tanks", "clans.messageboard")
        second = registry.lookup("tanks", "clans.messageboard")
        assert first == second == "wgn/clans/messageboard/"

    def test_tanks_operation_set_is_closed(self):
        assert sorted(registry.operations("tanks")) == sorted(TANKS_OPERATIONS)

    def test_unknown_operation_raises(self):
        with pytest.raises(UnknownOperationError) as exc_info:
            registry.lookup("tanks", "account.delete")
        assert exc_info.value.operation == "account.delete"

    def test_unknown_product_raises(self):
        with pytest.raises(UnknownOperationError):
            registry.lookup("worldofsubmarines", "account.list")
        with pytest.raises(UnknownOperationError):
            registry.operations("worldofsubmarines")

    def test_unknown_operation_is_lookup_error(self):
        with pytest.raises(LookupError):
            registry.lookup("tanks", "nope")


class TestUnimplemented:
    def test_warships_operations_have_no_path(self):
        ops = registry.operations("warships")
        assert len(ops) == 27
        assert all(registry.lookup("warships", op) is None for op in ops)

    def test_warplanes_operations_have_no_path(self):
        ops = registry.operations("warplanes")
        assert ops
        assert not any(registry.is_implemented("warplanes", op) for op in ops)

    def test_is_implemented(self):
        assert registry.is_implemented("tanks", "servers.info")
        assert not registry.is_implemented("warships", "ships.stats")


class TestCustomRegistry:
    def test_table_is_copied(self):
        table = {"tanks": {"account.list": "wgn/account/list/"}}
        reg = EndpointRegistry(table)
        table["tanks"]["account.list"] = "changed/"
        assert reg.lookup("tanks", "account.list") == "wgn/account/list/"

    def test_products(self):
        assert sorted(registry.products) == ["tanks", "warplanes", "warships"]
