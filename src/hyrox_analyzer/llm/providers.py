"""
LLM providers and model selection.

Single-shot OpenAI access for race enrichment:
- Model types for different task complexities
- JSON mode completions
- Mapping of OpenAI SDK failures onto the application's LLM exceptions

Requests are never retried. Enrichment runs under a hard deadline and the
deterministic report is always available as a fallback.
"""

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar
import asyncio
import json
import logging
import os
import threading
import time

from openai import AsyncOpenAI, APIError, APIConnectionError, APITimeoutError

from ..config import get_settings
from ..exceptions import (
    LLMError,
    LLMResponseInvalidError,
    LLMServiceUnavailableError,
    LLMTimeoutError,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ModelType(Enum):
    """Model types for different task complexities."""

    FAST = "fast"
    SMART = "smart"


class LLMClient:
    """
    Thin async wrapper over the OpenAI chat completions API.

    Every call is a single attempt. Failures surface as LLMError subclasses
    so callers only need to handle one exception family.
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        """
        Initialize the LLM client.

        Args:
            api_key: OpenAI API key (defaults to settings or env var)

        Raises:
            LLMServiceUnavailableError: If no API key is configured
        """
        settings = get_settings()
        api_key = api_key or settings.openai_api_key or os.environ.get("OPENAI_API_KEY")

        if not api_key:
            raise LLMServiceUnavailableError(
                message="OPENAI_API_KEY not configured",
                details={"configuration_missing": "openai_api_key"},
            )

        self.client = AsyncOpenAI(api_key=api_key, max_retries=0)
        self.model_map = {
            ModelType.FAST: settings.llm_model_fast,
            ModelType.SMART: settings.llm_model_smart,
        }
        self.default_temperature = settings.llm_temperature
        self.default_max_tokens = settings.llm_max_tokens
        self._logger = logger

    def _get_model(self, model_type: ModelType) -> str:
        return self.model_map.get(model_type, self.model_map[ModelType.SMART])

    async def _execute(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str = "LLM request",
    ) -> T:
        """Run one request and translate SDK errors."""
        start_time = time.time()
        try:
            result = await operation()
        except LLMError:
            raise
        except (asyncio.TimeoutError, APITimeoutError):
            raise LLMTimeoutError()
        except APIConnectionError as e:
            raise LLMServiceUnavailableError(
                message=f"Connection to LLM service failed: {e}",
            )
        except APIError as e:
            status = getattr(e, "status_code", 500)
            if status in (429, 500, 502, 503, 504):
                raise LLMServiceUnavailableError(
                    message=f"LLM API error: {e}",
                    details={"status_code": status},
                )
            raise LLMError(
                message=f"LLM API error: {e}",
                details={"status_code": status},
            )

        duration_ms = (time.time() - start_time) * 1000
        self._logger.debug(f"{operation_name} completed in {duration_ms:.0f}ms")
        return result

    async def completion_json(
        self,
        system: str,
        user: str,
        model: ModelType = ModelType.SMART,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = 60.0,
    ) -> Dict[str, Any]:
        """
        Get a JSON completion from the LLM using JSON mode.

        Args:
            system: System prompt
            user: User message (must mention JSON)
            model: Model type to use
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            timeout: Request timeout in seconds

        Returns:
            The parsed JSON object

        Raises:
            LLMError: On failure
            LLMResponseInvalidError: If the response is not a JSON object
        """
        async def _make_request() -> Dict[str, Any]:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self._get_model(model),
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                    max_tokens=max_tokens or self.default_max_tokens,
                    temperature=(
                        self.default_temperature if temperature is None else temperature
                    ),
                    response_format={"type": "json_object"},
                ),
                timeout=timeout,
            )
            content = response.choices[0].message.content
            if content is None:
                raise LLMResponseInvalidError(message="Empty response from LLM")
            try:
                parsed = json.loads(content)
            except json.JSONDecodeError as e:
                raise LLMResponseInvalidError(
                    message=f"Invalid JSON response from LLM: {e}",
                    raw_response=content,
                )
            if not isinstance(parsed, dict):
                raise LLMResponseInvalidError(
                    message="LLM response is not a JSON object",
                    raw_response=content,
                )
            return parsed

        return await self._execute(_make_request, "completion_json")

    def get_model_name(self, model_type: ModelType = ModelType.SMART) -> str:
        return self._get_model(model_type)


_llm_client: Optional[LLMClient] = None
_llm_client_lock = threading.Lock()


def get_llm_client() -> LLMClient:
    """
    Get the LLM client singleton.

    Raises:
        LLMServiceUnavailableError: If no API key is configured
    """
    global _llm_client
    if _llm_client is None:
        with _llm_client_lock:
            if _llm_client is None:
                _llm_client = LLMClient()
    return _llm_client


def reset_llm_client() -> None:
    """Reset the LLM client singleton (for testing)."""
    global _llm_client
    with _llm_client_lock:
        _llm_client = None
