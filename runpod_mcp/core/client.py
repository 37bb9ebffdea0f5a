# =============================================================================
# core/client.py  -  RunPod REST Transport
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs ONE authenticated HTTP call against the RunPod REST API and
#   normalizes the outcome.  Every tool in the server funnels through
#   RunPodClient.request().
#
# THE CONTRACT:
#   request(path, method="GET", body=None, params=None)
#
#   2xx + JSON content-type     -> the parsed JSON value
#   2xx + unparseable JSON      -> ApiError(status, raw body text)
#   2xx + anything else         -> {"success": True, "status": <code>}
#   non-2xx                     -> ApiError(status, raw body text)
#   no response (DNS, refused,
#   timeout, broken connection) -> TransportError
#
#   Failures are logged here, where they happen, and re-raised.  There is
#   no retry: the MCP client decides what to do next.
#
# TIMEOUTS:
#   Every request carries an explicit timeout (Settings.timeout_seconds).
#   A hung upstream surfaces as a TransportError instead of a tool call
#   that never returns.
# =============================================================================

import json
import logging
from typing import Any, Optional, Sequence

import httpx

from runpod_mcp.core.config import Settings
from runpod_mcp.core.errors import ApiError, TransportError
from runpod_mcp.core.models import HTTP_METHODS

logger = logging.getLogger(__name__)

# Methods that carry a JSON body.  A body passed with GET/DELETE is ignored.
_BODY_METHODS = ("POST", "PATCH")


class RunPodClient:
    """Async client for the RunPod REST API.

    Args:
        settings: Server configuration (API key, base URL, timeout).
        http_client: Optional pre-built httpx.AsyncClient.  Tests pass one
            backed by httpx.MockTransport.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self._settings = settings
        self._http = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        params: Optional[Sequence[tuple[str, str]]] = None,
    ) -> Any:
        """Send one request and return the normalized result."""
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self._settings.api_base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }

        content = None
        if body is not None and method in _BODY_METHODS:
            content = json.dumps(body)

        try:
            response = await self._http.request(
                method,
                url,
                params=list(params) if params else None,
                headers=headers,
                content=content,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.TransportError as exc:
            logger.error("Error calling RunPod API: %s %s failed: %s", method, path, exc)
            raise TransportError(f"Could not reach RunPod API ({method} {path}): {exc}") from exc

        if not response.is_success:
            error_text = response.text
            logger.error(
                "Error calling RunPod API: %s %s returned %s - %s",
                method, path, response.status_code, error_text,
            )
            raise ApiError(response.status_code, error_text)

        # Some endpoints (start/stop/delete) don't answer with JSON.
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type and response.content:
            try:
                return response.json()
            except ValueError as exc:
                logger.error(
                    "Error calling RunPod API: %s %s returned invalid JSON: %s",
                    method, path, response.text,
                )
                raise ApiError(response.status_code, response.text) from exc

        return {"success": True, "status": response.status_code}

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "RunPodClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
