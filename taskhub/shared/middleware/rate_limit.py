# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Request, request

from taskhub.shared.errors.base import RateLimitedError
from taskhub.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


class InMemoryRateLimiter:
    """Sliding-window limiter keyed by an arbitrary string.

    State lives in this process only; several workers each keep their own
    windows.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, deque[float]] = {}
        self._next_sweep = clock() + self._window

    @property
    def limit(self) -> int:
        return self._limit

    def hit(self, key: str) -> float:
        """Record a hit; return 0 when allowed, else seconds until a slot frees."""

        now = self._clock()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            hits = self._hits.setdefault(key, deque())
            self._prune(hits, now)
            if len(hits) >= self._limit:
                return self._window - (now - hits[0])
            hits.append(now)
            return 0.0

    def _prune(self, hits: deque[float], now: float) -> None:
        while hits and now - hits[0] >= self._window:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # keys seen once (spoofed forwarded-for values) are never hit again
        for key in list(self._hits):
            self._prune(self._hits[key], now)
            if not self._hits[key]:
                del self._hits[key]
        self._next_sweep = now + self._window

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


def client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def rate_limit(limiter: InMemoryRateLimiter | None) -> Callable[[F], F]:
    def decorator(view: F) -> F:
        if limiter is None:
            return view

        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = f"{request.path}:{client_key(request)}"
            retry_after = limiter.hit(key)
            if retry_after > 0:
                logger.warning(f"rate_limit: blocked key={key} retry_after={retry_after:.1f}s")
                raise RateLimitedError(retry_after)
            return view(*args, **kwargs)

        return cast(F, wrapper)

    return decorator


__all__ = ["InMemoryRateLimiter", "client_key", "rate_limit"]
