"""merge_params のテスト"""
from __future__ import annotations

from wargamingApi.base.params import merge_params


class TestMergeParams:
    def test_mandatory_wins_on_collision(self):
        merged = merge_params(
            {"application_id": "real", "account_id": 1},
            {"application_id": "evil", "account_id": 999},
        )
        assert merged["application_id"] == "real"
        assert merged["account_id"] == 1

    def test_disjoint_keys_union(self):
        mandatory = {"application_id": "abc", "search": "smith"}
        optional = {"fields": "nickname", "limit": 10}
        merged = merge_params(mandatory, optional)
        assert merged == {
            "application_id": "abc",
            "search": "smith",
            "fields": "nickname",
            "limit": 10,
        }

    def test_optional_not_mutated(self):
        optional = {"fields": "nickname"}
        merge_params({"application_id": "abc"}, optional)
        assert optional == {"fields": "nickname"}

    def test_returns_new_dict(self):
        optional = {"fields": "nickname"}
        merged = merge_params({"application_id": "abc"}, optional)
        assert merged is not optional

    def test_optional_none(self):
        assert merge_params({"application_id": "abc"}, None) == {"application_id": "abc"}

    def test_values_not_serialised(self):
        merged = merge_params({"application_id": "abc"}, {"account_id": [1, 2]})
        assert merged["account_id"] == [1, 2]
