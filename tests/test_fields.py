"""Tests for unstructured field helpers and age formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from mcp_k8s.mapper.fields import (
    creation_age,
    format_age,
    get_name,
    get_namespace,
    nested_int,
    nested_list,
    nested_string,
    parse_timestamp,
)

NOW = datetime(2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


class TestNestedAccess:

    @pytest.mark.unit
    def test_missing_path_is_none(self):
        assert nested_string({}, "spec", "type") is None
        assert nested_string({"spec": None}, "spec", "type") is None

    @pytest.mark.unit
    def test_type_mismatch_is_none(self):
        obj = {"spec": {"replicas": "3", "ready": True, "ports": {}}}
        assert nested_int(obj, "spec", "replicas") is None
        assert nested_int(obj, "spec", "ready") is None
        assert nested_list(obj, "spec", "ports") is None

    @pytest.mark.unit
    def test_zero_is_present(self):
        assert nested_int({"status": {"replicas": 0}}, "status", "replicas") == 0

    @pytest.mark.unit
    def test_name_and_namespace(self):
        obj = {"metadata": {"name": "web", "namespace": ""}}
        assert get_name(obj) == "web"
        assert get_namespace(obj) is None
        assert get_name({}) == ""


class TestTimestamps:

    @pytest.mark.unit
    def test_parse_second_precision(self):
        assert parse_timestamp("2025-01-10T11:00:00Z") == NOW - timedelta(hours=1)

    @pytest.mark.unit
    def test_parse_micro_time(self):
        parsed = parse_timestamp("2025-01-10T11:59:00.123456Z")
        assert parsed is not None
        assert parsed.tzinfo is not None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,micros",
        [
            ("2025-01-10T11:59:00.1Z", 100000),
            ("2025-01-10T11:59:00.12345Z", 123450),
            ("2025-01-10T11:59:00.123456789Z", 123456),
        ],
    )
    def test_parse_any_fraction_width(self, value, micros):
        expected = NOW - timedelta(minutes=1) + timedelta(microseconds=micros)
        assert parse_timestamp(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "yesterday", "2025-13-40T00:00:00Z"])
    def test_parse_invalid(self, value):
        assert parse_timestamp(value) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=30), "< 1m"),
            (timedelta(minutes=5), "5m"),
            (timedelta(minutes=59, seconds=59), "59m"),
            (timedelta(hours=3), "3h"),
            (timedelta(hours=23, minutes=59), "23h"),
            (timedelta(days=2), "2d"),
            (timedelta(days=400), "400d"),
        ],
    )
    def test_format_age_buckets(self, delta, expected):
        assert format_age(NOW - delta, now=NOW) == expected

    @pytest.mark.unit
    def test_creation_age_absent(self):
        assert creation_age({"metadata": {"name": "x"}}) is None
        assert creation_age({"metadata": {"creationTimestamp": "garbage"}}) is None
