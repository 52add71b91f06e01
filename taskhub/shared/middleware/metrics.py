# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request

from taskhub.infrastructure.observability import HttpMetrics

UNMATCHED_ROUTE = "unmatched"


def _route_label() -> str:
    # Rule templates keep label cardinality bounded: /api/tasks/<int:task_id>, not /api/tasks/17.
    rule = request.url_rule
    return rule.rule if rule is not None else UNMATCHED_ROUTE


def configure_metrics(app: Flask, metrics: HttpMetrics) -> None:
    @app.before_request
    def _start_timer() -> None:
        g.metrics_start_time = time.perf_counter()

    @app.after_request
    def _record(response: Response) -> Response:
        started = getattr(g, "metrics_start_time", None)
        duration = time.perf_counter() - started if started is not None else 0.0
        metrics.record_request(request.method, _route_label(), response.status_code, duration)
        return response


__all__ = ["configure_metrics"]
