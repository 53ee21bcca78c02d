"""OpenAI Chat Completions client for the forecast text.

One request per run. Failures are not retried; the bulletin is regenerated
on the next scheduled invocation instead.
"""

import logging
import os

import httpx

from bulletin.config.defaults import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT_SECONDS,
    OPENAI_API_BASE,
)
from bulletin.models.report import ForecastRequest

logger = logging.getLogger(__name__)


class CredentialError(Exception):
    """Raised when the provider API key is not configured."""


class ProviderError(Exception):
    """Raised when the text-generation provider fails or returns garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def resolve_api_key(env_var: str = DEFAULT_API_KEY_ENV) -> str:
    """Read the pre-shared key from the environment or raise CredentialError."""
    key = os.environ.get(env_var, "").strip()
    if not key:
        raise CredentialError(f"{env_var} environment variable is not set")
    return key


class OpenAIClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENAI_API_BASE,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        api_key_env: str = DEFAULT_API_KEY_ENV,
    ):
        self.api_key = api_key or resolve_api_key(api_key_env)
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _payload(self, request: ForecastRequest) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.user_prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def complete(self, request: ForecastRequest) -> str:
        """Send the forecast request and return the trimmed reply text."""
        url = f"{self.base_url}/chat/completions"
        logger.info("Requesting forecast from %s (model=%s)", url, self.model)
        try:
            resp = httpx.post(
                url,
                headers=self._headers(),
                json=self._payload(request),
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("Provider request failed: %s", e)
            raise ProviderError(f"Request to provider failed: {e}") from e

        if resp.status_code >= 400:
            body = resp.text
            logger.error("Provider API %d: POST %s -> %s", resp.status_code, url, body)
            raise ProviderError(f"HTTP {resp.status_code}: {body}", resp.status_code)

        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                f"Unexpected provider response: {resp.text[:240]}", resp.status_code
            ) from e
        if not isinstance(content, str):
            raise ProviderError("Provider returned no message content", resp.status_code)

        logger.info("Received %d characters from provider", len(content))
        return content.strip()
