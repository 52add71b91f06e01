# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import uuid

from flask import Flask, Response, g, request

from taskhub.shared.logging import clear_correlation_id, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

# Incoming ids end up in log lines, so only short token-like values are trusted.
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,128}$")


def _incoming_request_id() -> str:
    candidate = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if candidate and _VALID_REQUEST_ID.match(candidate):
        return candidate
    return uuid.uuid4().hex


def configure_request_id(app: Flask) -> None:
    @app.before_request
    def _assign_request_id() -> None:
        request_id = _incoming_request_id()
        g.request_id = request_id
        set_correlation_id(request_id)

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.teardown_request
    def _clear_request_id(_: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_id"]
