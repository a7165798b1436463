"""Connectivity verification against a service's HTTP /health endpoint."""

from __future__ import annotations

import logging
from contextlib import nullcontext

import httpx

from rice_cli.logging import ProgressFactory
from rice_cli.models import HealthCheckResult

# Suppress httpx INFO logs by default (HTTP request logs pollute CLI output)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

__all__ = ["health_url", "check_health"]


def health_url(url: str, http_port: str) -> str:
    """Derive the health endpoint from an instance address and HTTP port.

    The instance address may carry another protocol's port (e.g. gRPC), so
    only its host part is kept.

    Example:
        >>> health_url("localhost:50051", "3000")
        'http://localhost:3000/health'
    """
    host = url.split(":", 1)[0] if ":" in url else url
    return f"http://{host}:{http_port}/health"


def check_health(
    url: str,
    http_port: str,
    *,
    client: httpx.Client | None = None,
    progress: ProgressFactory | None = None,
    message: str | None = None,
) -> HealthCheckResult:
    """Probe the health endpoint once and classify the outcome.

    Args:
        url: Instance address (host or host:port).
        http_port: Port the HTTP API listens on.
        client: HTTP client to use. When omitted, a default client is created
            and closed after the request.
        progress: Busy-indicator factory, entered for the duration of the
            request only.
        message: Text shown by the busy indicator.

    Returns:
        Healthy for any 2xx, Unhealthy for other statuses, Unreachable when
        the request never produced a response.
    """
    target = health_url(url, http_port)
    indicator = progress(message or f"Checking health at {target}...") if progress else nullcontext()
    owns_client = client is None
    http = client if client is not None else httpx.Client()

    logger.debug(f"GET {target}")
    try:
        with indicator:
            response = http.get(target)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug(f"Health probe failed: {e!r}")
        return HealthCheckResult.unreachable(target, str(e) or e.__class__.__name__)
    finally:
        if owns_client:
            http.close()

    if response.is_success:
        return HealthCheckResult.healthy(target, response.status_code)
    return HealthCheckResult.unhealthy(target, response.status_code)
