# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, abort, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from taskhub.infrastructure.health import check_database
from taskhub.infrastructure.observability import HttpMetrics
from taskhub.shared.config import AppConfig
from taskhub.shared.logging import logger


class MiscController:
    def __init__(
        self,
        *,
        config: AppConfig,
        engine: Engine,
        metrics: HttpMetrics | None = None,
    ) -> None:
        self._config = config
        self._engine = engine
        self._metrics = metrics

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule(f"{self._config.url_prefix}/", view_func=self.info, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.ready, methods=["GET"], endpoint="health")
        bp.add_url_rule("/health/live", view_func=self.live, methods=["GET"])
        bp.add_url_rule("/health/ready", view_func=self.ready, methods=["GET"])
        if self._metrics is not None:
            bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def info(self) -> Response:
        return jsonify(
            {
                "name": self._config.app_name,
                "version": self._config.api_version,
                "environment": self._config.app_env,
            }
        )

    def live(self) -> Response:
        return jsonify({"status": "ok"})

    def ready(self) -> tuple[Response, int]:
        try:
            check_database(self._engine)
        except SQLAlchemyError as exc:
            logger.error(f"health.ready: database check failed: {type(exc).__name__}")
            return jsonify({"status": "unavailable", "checks": {"database": "error"}}), 503
        return jsonify({"status": "ok", "checks": {"database": "ok"}}), 200

    def metrics(self) -> Response:
        metrics = self._metrics
        if metrics is None:
            abort(404)
        return Response(metrics.render(), content_type=metrics.content_type)
