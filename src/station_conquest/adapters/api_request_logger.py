"""Utility for logging API requests when SCQ_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via SCQ_LOG_REQUESTS environment variable."""
    return os.getenv("SCQ_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_payload(payload: Any) -> Any:
    """Hide the user id in logged payloads."""
    if isinstance(payload, dict) and "user_id" in payload:
        return {**payload, "user_id": "***REDACTED***"}
    return payload


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if SCQ_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        payload: JSON body (optional, user ids are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if payload is not None:
        log_parts.append(f"Payload: {json.dumps(_redact_payload(payload), indent=2, default=str)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
