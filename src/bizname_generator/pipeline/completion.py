"""Async client for the Gemini generateContent endpoint.

One POST per call, no retry. The api key travels as the `key` query
parameter and is never logged. httpx itself logs each request URL at INFO,
so its logger is raised to WARNING on import unless the host already set a
level for it.
"""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from bizname_generator.common.config import Settings, load_settings
from bizname_generator.common.errors import MalformedEnvelope, NetworkUnavailable, TransportError

LOGGER = logging.getLogger("bizname.pipeline.completion")

_HTTPX_LOGGER = logging.getLogger("httpx")
if _HTTPX_LOGGER.level == logging.NOTSET:
    _HTTPX_LOGGER.setLevel(logging.WARNING)

FALLBACK_ERROR_MESSAGE = "Failed to generate names"


def _provider_message(response: httpx.Response) -> str:
    """Pull error.message out of an error body; fall back when absent."""
    try:
        data = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
        if message:
            return str(message)
    return FALLBACK_ERROR_MESSAGE


def _extract_text(data: Any) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedEnvelope(f"missing candidates[0].content.parts[0].text: {e!r}") from e
    if not isinstance(text, str):
        raise MalformedEnvelope(f"completion text is {type(text).__name__}, expected str")
    return text


class CompletionClient:
    """
    Sends a prompt to the completion endpoint and returns the raw reply text.

    Args:
        settings: Endpoint, credential, model and timeout. Loaded from the
            environment when omitted.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._transport = transport

    async def complete(self, prompt: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        params = {"key": self.settings.api_key}
        headers = {"Content-Type": "application/json"}

        start = time.time()
        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
                r = await client.post(self.settings.endpoint, params=params, headers=headers, json=payload)
        except httpx.DecodingError as e:
            LOGGER.error("Completion response body could not be decoded: %s", e)
            raise MalformedEnvelope(f"response body could not be decoded: {e}") from e
        except httpx.RequestError as e:
            LOGGER.error("Completion request failed: %s", type(e).__name__)
            raise NetworkUnavailable(f"{type(e).__name__}: request could not be completed") from e

        latency_ms = int((time.time() - start) * 1000)
        LOGGER.info("Completion response status=%s latency=%sms", r.status_code, latency_ms)

        if not r.is_success:
            message = _provider_message(r)
            LOGGER.error("Completion endpoint error %s: %s", r.status_code, message)
            raise TransportError(message, status=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise MalformedEnvelope("response body is not JSON") from e

        text = _extract_text(data)
        LOGGER.debug("Generated text: %s", text)
        return text
