"""Tests for memory quantity parsing."""

import pytest

from mcp_k8s.mapper import parse_memory_to_mib


class TestParseMemoryToMiB:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "quantity,expected",
        [
            ("", 0),
            ("128Mi", 128),
            ("1Gi", 1024),
            ("1.5Gi", 1536),
            ("500000000", 476),
            ("invalid", 0),
            ("123", 0),
        ],
    )
    def test_reference_table(self, quantity, expected):
        assert parse_memory_to_mib(quantity) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "quantity,expected",
        [
            ("2048Ki", 2),
            ("1536k", 1),
            ("256M", 256),
            ("2G", 2048),
            ("1Ti", 1048576),
            ("1T", 1048576),
        ],
    )
    def test_suffixes(self, quantity, expected):
        assert parse_memory_to_mib(quantity) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("quantity", ["1Pi", "1Ei", "5x", "Mi", "-1Gi", "1e9"])
    def test_unsupported_input_is_zero(self, quantity):
        assert parse_memory_to_mib(quantity) == 0

    @pytest.mark.unit
    def test_fractional_result_truncates(self):
        assert parse_memory_to_mib("1.9Mi") == 1
        assert parse_memory_to_mib("1023Ki") == 0
