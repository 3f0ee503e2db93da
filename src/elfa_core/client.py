from __future__ import annotations

from typing import Any, Mapping

import httpx
from loguru import logger

from elfa_core.config import ElfaConfig
from elfa_core.errors import UpstreamError
from elfa_core.logging_utils import log_event

API_KEY_HEADER = "x-elfa-api-key"


def elfa_endpoint(base_url: str, path: str) -> str:
    normalized = path if path.startswith("/") else f"/{path}"
    return f"{base_url.strip().rstrip('/')}{normalized}"


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        API_KEY_HEADER: api_key,
    }


def _extract_error_payload(response: httpx.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        payload = response.text

    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, dict):
            message = str(detail.get("error") or detail.get("message") or response.reason_phrase)
        else:
            message = str(payload.get("message") or payload.get("error") or detail or response.reason_phrase)
    else:
        message = str(payload or response.reason_phrase)

    return message, payload


class ElfaClient:
    """
    Issues one GET per call against the Elfa AI API.

    No retries and no timeout override: a failed attempt surfaces as
    UpstreamError and the caller decides what to tell the user.

    An injected `http_client` belongs to the host, which closes it; without
    one, each call opens and closes its own client.
    """

    def __init__(
        self,
        config: ElfaConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._http_client = http_client

    async def _send(self, endpoint: str, params: Mapping[str, Any] | None) -> httpx.Response:
        kwargs = {
            "params": dict(params) if params else None,
            "headers": build_headers(self._config.api_key),
        }
        if self._http_client is not None:
            return await self._http_client.get(endpoint, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.get(endpoint, **kwargs)

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        endpoint = elfa_endpoint(self._config.base_url, path)
        logger.debug(log_event("elfa.request", path=path, params=dict(params or {})))

        try:
            response = await self._send(endpoint, params)
        except httpx.RequestError as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning(log_event("elfa.request.failed", path=path, error=message))
            raise UpstreamError(message=message, payload={"error": message}) from exc

        if not response.is_success:
            message, payload = _extract_error_payload(response)
            logger.warning(
                log_event("elfa.request.rejected", path=path, status=response.status_code, error=message)
            )
            raise UpstreamError(message=message, status_code=response.status_code, payload=payload)

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(
                message="Invalid JSON response",
                status_code=response.status_code,
                payload=response.text,
            ) from exc

        logger.info(log_event("elfa.request.ok", path=path, status=response.status_code))
        return data
