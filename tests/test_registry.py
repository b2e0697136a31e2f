"""Tests for kind normalisation and the mapper registry."""

import pytest

from mcp_k8s.mapper import MapperRegistry, build_default_registry, normalize_kind
from mcp_k8s.mapper.pod import map_pod
from mcp_k8s.models import GroupVersionKind


def _mapper_a(item):
    return "a"


def _mapper_b(item):
    return "b"


class TestNormalizeKind:

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["pod", "POD", "Pod", "pOd"])
    def test_casings_collapse(self, kind):
        assert normalize_kind(kind) == "Pod"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind",
        [
            "",
            "a",
            "deployment",
            "ConfigMap",
            "CUSTOMRESOURCEDEFINITION",
            "ñame",
            "ß",
            "ßmap",
            "ﬁle",
            "ŉx",
        ],
    )
    def test_idempotent(self, kind):
        once = normalize_kind(kind)
        assert normalize_kind(once) == once

    @pytest.mark.unit
    def test_inner_capitals_are_lowered(self):
        assert normalize_kind("ConfigMap") == "Configmap"
        assert normalize_kind("statefulSet") == "Statefulset"

    @pytest.mark.unit
    def test_empty_kind(self):
        assert normalize_kind("") == ""

    @pytest.mark.unit
    def test_multi_char_uppercase_keeps_first_character(self):
        assert normalize_kind("ßMAP") == "ßmap"
        assert normalize_kind("ﬁLE") == "ﬁle"


class TestMapperRegistry:

    @pytest.mark.unit
    @pytest.mark.parametrize("lookup", ["POD", "Pod", "pOd", "pod"])
    def test_lookup_ignores_kind_casing(self, lookup):
        registry = MapperRegistry()
        registry.register(GroupVersionKind("", "v1", "pod"), _mapper_a)

        assert registry.get(GroupVersionKind("", "v1", lookup)) is _mapper_a

    @pytest.mark.unit
    def test_lookup_by_normalized_kind(self):
        registry = MapperRegistry()
        registry.register(GroupVersionKind("x.io", "v1", "ßmap"), _mapper_a)

        key = GroupVersionKind("x.io", "v1", normalize_kind("ßmap"))
        assert registry.get(key) is _mapper_a

    @pytest.mark.unit
    def test_last_registration_wins(self):
        registry = MapperRegistry()
        registry.register(GroupVersionKind("apps", "v1", "deployment"), _mapper_a)
        registry.register(GroupVersionKind("apps", "v1", "DEPLOYMENT"), _mapper_b)

        assert len(registry) == 1
        assert registry.get(GroupVersionKind("apps", "v1", "Deployment")) is _mapper_b

    @pytest.mark.unit
    def test_group_and_version_match_exactly(self):
        registry = MapperRegistry()
        registry.register(GroupVersionKind("apps", "v1", "Deployment"), _mapper_a)

        assert registry.get(GroupVersionKind("apps", "v1beta1", "Deployment")) is None
        assert registry.get(GroupVersionKind("", "v1", "Deployment")) is None

    @pytest.mark.unit
    def test_missing_kind_returns_none(self):
        assert MapperRegistry().get(GroupVersionKind("", "v1", "Secret")) is None

    @pytest.mark.unit
    def test_contains_and_clear(self):
        registry = MapperRegistry()
        registry.register(GroupVersionKind("", "v1", "Pod"), _mapper_a)

        assert GroupVersionKind("", "v1", "pod") in registry
        assert "Pod" not in registry

        registry.clear()
        assert len(registry) == 0


class TestDefaultRegistry:

    @pytest.mark.unit
    def test_builtin_kinds_registered(self):
        registry = build_default_registry()
        expected = [
            ("", "v1", "Pod"),
            ("", "v1", "Service"),
            ("", "v1", "Node"),
            ("", "v1", "Event"),
            ("apps", "v1", "Deployment"),
            ("apps", "v1", "StatefulSet"),
            ("apps", "v1", "DaemonSet"),
            ("batch", "v1", "Job"),
            ("batch", "v1", "CronJob"),
            ("networking.k8s.io", "v1", "Ingress"),
            ("events.k8s.io", "v1", "Event"),
            ("events.k8s.io", "v1beta1", "Event"),
            ("apiextensions.k8s.io", "v1", "CustomResourceDefinition"),
            ("apiextensions.k8s.io", "v1beta1", "CustomResourceDefinition"),
        ]
        for identity in expected:
            assert GroupVersionKind(*identity) in registry, identity
        assert len(registry) == len(expected)

    @pytest.mark.unit
    def test_pod_lookup_any_casing(self):
        registry = build_default_registry()
        assert registry.get(GroupVersionKind("", "v1", "pod")) is map_pod

    @pytest.mark.unit
    def test_identities_are_normalised_and_sorted(self):
        identities = build_default_registry().identities()
        assert identities == sorted(identities)
        assert GroupVersionKind("apps", "v1", "Statefulset") in identities
