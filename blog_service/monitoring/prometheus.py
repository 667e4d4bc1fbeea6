"""
Prometheus metrics for photo asset operations.

Asset uploads and removals happen outside the record store transaction, so
every outcome is counted here. Failed best-effort cleanups are the signal an
out-of-band reconciliation sweep would act on.

Security
--------
Blog ids, asset ids and user ids are NEVER used as labels.

Examples
--------
>>> from blog_service.monitoring import metrics
>>> metrics.record_asset_operation("upload", "success")
"""

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

ASSET_OPERATIONS: frozenset[str] = frozenset({"upload", "remove"})
ASSET_OUTCOMES: frozenset[str] = frozenset({"success", "not_found", "failure"})


class MetricsCollector:
    """
    Metrics collector for the asset store gateway.

    Attributes
    ----------
    asset_operations_total : Counter
        Asset store calls by operation and outcome
    asset_cleanup_failures_total : Counter
        Best-effort removals that failed and left an orphaned asset
    """

    def __init__(self) -> None:
        self.asset_operations_total = Counter(
            "blog_asset_operations_total",
            "Total number of asset store operations",
            ["operation", "outcome"],
        )
        self.asset_cleanup_failures_total = Counter(
            "blog_asset_cleanup_failures_total",
            "Total number of swallowed asset removal failures",
            ["operation"],  # update, delete
        )

    def record_asset_operation(self, operation: str, outcome: str) -> None:
        """
        Record an asset store call.

        Args:
            operation: ``upload`` or ``remove``.
            outcome: ``success``, ``not_found`` or ``failure``.
        """
        if operation not in ASSET_OPERATIONS or outcome not in ASSET_OUTCOMES:
            return
        self.asset_operations_total.labels(operation=operation, outcome=outcome).inc()

    def record_asset_cleanup_failure(self, operation: str) -> None:
        """Record a swallowed removal failure for a lifecycle operation."""
        self.asset_cleanup_failures_total.labels(operation=operation).inc()


metrics = MetricsCollector()


def setup_metrics_route(app: FastAPI) -> None:
    """Expose the default registry at ``/metrics``."""

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
