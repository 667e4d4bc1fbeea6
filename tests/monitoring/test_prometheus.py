"""Tests for Prometheus metrics functionality."""

from prometheus_client import REGISTRY

from blog_service.monitoring import metrics


def _value(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_record_asset_operation() -> None:
    labels = {"operation": "remove", "outcome": "success"}
    before = _value("blog_asset_operations_total", labels)

    metrics.record_asset_operation("remove", "success")

    assert _value("blog_asset_operations_total", labels) == before + 1


def test_unknown_labels_ignored() -> None:
    metrics.record_asset_operation("resize", "success")

    assert REGISTRY.get_sample_value(
        "blog_asset_operations_total",
        {"operation": "resize", "outcome": "success"},
    ) is None


def test_record_cleanup_failure() -> None:
    labels = {"operation": "delete"}
    before = _value("blog_asset_cleanup_failures_total", labels)

    metrics.record_asset_cleanup_failure("delete")

    assert _value("blog_asset_cleanup_failures_total", labels) == before + 1
