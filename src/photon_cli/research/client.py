# src/photon_cli/research/client.py
"""
OpenRouter chat-completions transport.

Sends one system/user prompt pair and returns the answer text. A response
body that is not the expected ``choices[0].message.content`` shape is
passed through whole, so callers can always render something.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from photon_cli.config.env_vars import EnvVar
from photon_cli.constants.providers import (
    APP_REFERER,
    APP_TITLE,
    OPENROUTER_CHAT_URL,
)
from photon_cli.constants.timeouts import (
    DEFAULT_HTTP_CONNECT_TIMEOUT,
    DEFAULT_HTTP_REQUEST_TIMEOUT,
)
from photon_cli.exceptions import MissingCredentialError, TransportError
from photon_cli.research.formatter import Prompt

logger = logging.getLogger(__name__)


def build_payload(api_name: str, prompt: Prompt) -> dict[str, Any]:
    """Build the chat-completions request body."""
    return {"model": api_name, "messages": prompt.to_messages()}


def extract_content(body: str) -> str:
    """
    Pull the answer text out of a chat-completions response body.

    Returns the raw body unchanged if it is not JSON of the expected shape.
    """
    try:
        data = json.loads(body)
        content = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        logger.debug("Unexpected response shape, passing raw body through")
        return body

    if not isinstance(content, str):
        return body
    return content


class OpenRouterClient:
    """Minimal OpenRouter client for single-shot research queries."""

    def __init__(
        self,
        api_key: str | None,
        url: str = OPENROUTER_CHAT_URL,
        timeout: httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            api_key: OpenRouter API key
            url: Chat-completions endpoint
            timeout: httpx timeout (defaults from constants)
            transport: Optional httpx transport, for tests

        Raises:
            MissingCredentialError: if api_key is empty
        """
        if not api_key:
            raise MissingCredentialError(EnvVar.OPEN_ROUTER_KEY.value)
        self._api_key = api_key
        self.url = url
        self.timeout = timeout or httpx.Timeout(
            DEFAULT_HTTP_REQUEST_TIMEOUT, connect=DEFAULT_HTTP_CONNECT_TIMEOUT
        )
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": APP_REFERER,
            "X-Title": APP_TITLE,
        }

    async def complete(self, api_name: str, prompt: Prompt) -> str:
        """
        Send the prompt and return the answer text.

        Raises:
            TransportError: on network or protocol failure
        """
        payload = build_payload(api_name, prompt)
        logger.debug(f"POST {self.url} model={api_name}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.url, headers=self.headers, json=payload
                )
        except httpx.HTTPError as e:
            logger.debug(f"Request to {self.url} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__, url=self.url) from e

        logger.debug(f"Response {response.status_code} ({len(response.text)} chars)")
        return extract_content(response.text)
