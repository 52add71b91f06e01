# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest

DURATION_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10)


class HttpMetrics:
    """Request counters and latency histogram in a per-application registry."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, service_name: str, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self.requests = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            labelnames=("method", "route", "status"),
            registry=self.registry,
        )
        self.duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            labelnames=("method", "route", "status"),
            buckets=DURATION_BUCKETS,
            registry=self.registry,
        )
        self.auth_failures = Counter(
            "auth_failures_total",
            "Rejected authentication attempts",
            labelnames=("stage",),
            registry=self.registry,
        )
        self.service_name = service_name

    def record_request(self, method: str, route: str, status: int, duration: float) -> None:
        labels = {"method": method, "route": route, "status": str(status)}
        self.requests.labels(**labels).inc()
        self.duration.labels(**labels).observe(duration)

    def record_auth_failure(self, stage: str) -> None:
        self.auth_failures.labels(stage=stage).inc()

    def render(self) -> bytes:
        return generate_latest(self.registry)


__all__ = ["DURATION_BUCKETS", "HttpMetrics"]
