# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .error_handler import configure_error_handling
from .metrics import configure_metrics
from .rate_limit import InMemoryRateLimiter, rate_limit
from .request_id import REQUEST_ID_HEADER, configure_request_id
from .request_logger import configure_request_logging
from .security_headers import configure_security_headers

__all__ = [
    "InMemoryRateLimiter",
    "REQUEST_ID_HEADER",
    "configure_error_handling",
    "configure_metrics",
    "configure_request_id",
    "configure_request_logging",
    "configure_security_headers",
    "rate_limit",
]
