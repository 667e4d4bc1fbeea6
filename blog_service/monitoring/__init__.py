"""
Monitoring and observability module for the blog content service.

Usage
-----
>>> from blog_service.monitoring import get_logger, metrics
>>> logger = get_logger(__name__)
>>> metrics.record_asset_cleanup_failure("delete")
"""

from blog_service.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    get_request_id,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)
from blog_service.monitoring.prometheus import MetricsCollector, metrics, setup_metrics_route

__all__ = [
    # Logging
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
    # Metrics
    "MetricsCollector",
    "metrics",
    "setup_metrics_route",
]
