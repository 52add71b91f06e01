# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, current_app
from flask_cors import CORS

from taskhub.infrastructure.container import Container
from taskhub.infrastructure.db.session import build_engine, build_session_factory, init_db
from taskhub.shared.config import AppConfig, load_config
from taskhub.shared.logging import logger, setup_logging
from taskhub.shared.middleware import (
    configure_error_handling,
    configure_metrics,
    configure_request_id,
    configure_request_logging,
    configure_security_headers,
)

EXTENSION_KEY = "taskhub"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    engine = build_engine(config.database)
    init_db(engine)
    container = Container(config, engine=engine, session_factory=build_session_factory(engine))

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = container

    # Registration order matters: request id first so every later hook logs under it.
    configure_request_id(app)
    configure_request_logging(app, debug_mode=config.debug_logging)
    if container.metrics is not None:
        configure_metrics(app, container.metrics)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    if config.security.cors_enabled:
        CORS(
            app,
            resources={rf"{config.url_prefix}/*": {"origins": config.security.allowed_origins}},
            expose_headers=["X-Request-ID"],
        )

    prefix = config.url_prefix
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint(prefix))
    app.register_blueprint(container.users_controller.as_blueprint(prefix))
    app.register_blueprint(container.tasks_controller.as_blueprint(prefix))

    logger.info(
        f"Flask app initialized env={config.app_env} prefix={prefix or '/'} "
        f"metrics={container.metrics is not None} rate_limit={container.rate_limiter is not None}"
    )
    return app


def get_container(app: Flask | None = None) -> Container:
    return (app or current_app).extensions[EXTENSION_KEY]


__all__ = ["EXTENSION_KEY", "create_app", "get_container"]
