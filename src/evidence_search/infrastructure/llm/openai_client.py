"""
OpenAI chat-completion client.

Thin async wrapper around the OpenAI SDK that returns the raw JSON text of
one completion. SDK errors are translated into the shared exception
hierarchy so callers only deal with EvidenceSearchError subclasses.
"""

from __future__ import annotations

import logging

import openai
from openai import AsyncOpenAI

from evidence_search.shared.exceptions import (
    NetworkError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"


class OpenAICompletionClient:
    """
    JSON-mode chat completions.

    Usage:
        client = OpenAICompletionClient(api_key=key)
        text = await client.complete_json(system_prompt, user_prompt)
    """

    _service_name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.5,
        timeout: float = 30.0,
    ) -> None:
        self._model = model
        self._temperature = temperature
        # Retries are left to the caller's timeout budget
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    @property
    def model(self) -> str:
        return self._model

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run one completion in JSON-object mode.

        Returns:
            The message content (a JSON object as text)

        Raises:
            RateLimitError: The API rejected the call with 429
            NetworkError: Connection failure or SDK-side timeout
            ServiceUnavailableError: Any other API status error
            ParseError: The completion came back without content
        """
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                temperature=self._temperature,
            )
        except openai.RateLimitError as e:
            raise RateLimitError(f"{self._service_name} rate limit: {e}", operation="complete_json") from e
        except openai.APIConnectionError as e:
            # Also covers APITimeoutError
            raise NetworkError(f"{self._service_name} connection failed: {e}", operation="complete_json") from e
        except openai.APIStatusError as e:
            raise ServiceUnavailableError(
                f"HTTP {e.status_code}", service=self._service_name, operation="complete_json"
            ) from e

        if not response.choices:
            raise ParseError("completion has no choices", source=self._service_name)

        content = response.choices[0].message.content
        if not content:
            raise ParseError("empty completion", source=self._service_name)

        logger.debug(f"{self._service_name} completion: {len(content)} chars from {self._model}")
        return content

    async def close(self) -> None:
        await self._client.close()
