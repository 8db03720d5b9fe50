"""Utility for logging API requests when SIR_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = {"authorization", "cookie", "x-api-key", "acl:consumerkey"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via SIR_LOG_REQUESTS environment variable."""
    return os.getenv("SIR_LOG_REQUESTS", "").lower() == "true"


def _redact(values: dict[str, Any]) -> dict[str, Any]:
    """Redact credentials from headers or query parameters."""
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in values.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with (redacted) query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(_redact(params).items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if SIR_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional, credentials are redacted).
        headers: Request headers (optional, credentials are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
