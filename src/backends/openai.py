from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable

from model import LLMModel, LLMRequest

logger = logging.getLogger(__name__)

# Gemini's OpenAI-compatible surface; any OpenAI-compatible provider works.
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_P = 0.95
DEFAULT_API_KEY_ENV_VAR = "LLM_API_KEY"
DEFAULT_BASE_URL_ENV_VAR = "LLM_BASE_URL"
DEFAULT_MODEL_ENV_VAR = "LLM_MODEL"


@dataclass(frozen=True)
class OpenAIBackendConfig:
    api_key: str | None = None
    api_key_env_var: str = DEFAULT_API_KEY_ENV_VAR
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    top_p: float = DEFAULT_TOP_P
    max_new_tokens: int | None = None
    # Provider-specific payload sent as `extra_body` for unfiltered requests,
    # e.g. safety settings that relax the provider's content filter.
    unfiltered_extra_body: dict[str, Any] | None = None


def _default_client_factory(api_key: str, base_url: str) -> Any:
    from openai import OpenAI

    return OpenAI(api_key=api_key, base_url=base_url)


def _extract_text_content(raw_content: Any) -> str:
    if isinstance(raw_content, str):
        return raw_content
    if isinstance(raw_content, list):
        parts: list[str] = []
        for item in raw_content:
            if isinstance(item, dict) and item.get("type") == "text":
                text = item.get("text", "")
            else:
                text = getattr(item, "text", "")
            if isinstance(text, str):
                parts.append(text)
        return "".join(parts)
    return ""


def _openai_error_types() -> tuple[Any, Any, Any, Any]:
    try:
        import openai
    except ImportError:
        return None, None, None, None
    return (
        openai.RateLimitError,
        openai.APIStatusError,
        openai.APITimeoutError,
        openai.APIConnectionError,
    )


class OpenAILLMModel(LLMModel):
    def __init__(
        self,
        config: OpenAIBackendConfig | None = None,
        client: Any | None = None,
        client_factory: Callable[[str, str], Any] | None = None,
    ) -> None:
        self._config = config or OpenAIBackendConfig()
        self._base_url = self._resolve_base_url(self._config)
        self._model = self._resolve_model(self._config)
        if client is not None:
            self._client = client
            return

        api_key = self._resolve_api_key(self._config)
        factory = client_factory or _default_client_factory
        self._client = factory(api_key, self._base_url)

    @property
    def model_name(self) -> str:
        return self._model

    def generate(self, request: LLMRequest) -> str:
        create_kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": self._config.temperature,
            "top_p": self._config.top_p,
        }
        if self._config.max_new_tokens is not None:
            create_kwargs["max_tokens"] = self._config.max_new_tokens
        if request.unfiltered and self._config.unfiltered_extra_body:
            create_kwargs["extra_body"] = dict(self._config.unfiltered_extra_body)

        response = self._create_with_retry(create_kwargs, request)
        return self._read_response(response, request)

    def _create_with_retry(
        self,
        create_kwargs: dict[str, Any],
        request: LLMRequest,
        max_retries: int = 5,
        base_delay: float = 1.0,
        max_delay: float = 60.0,
    ) -> Any:
        """Call the completions endpoint, retrying transient failures.

        Retry policy:
        - 429 (RateLimitError): exponential backoff retry
        - 5xx (server errors): exponential backoff retry
        - Timeout: exponential backoff retry
        - 4xx (client errors, except 429): fast fail with readable message
        """
        RateLimitError, APIStatusError, APITimeoutError, APIConnectionError = _openai_error_types()

        logger.info(f"[LLM] [{request.task}] Request: prompt_len={len(request.prompt)} chars")

        for attempt in range(max_retries):
            try:
                start_time = time.time()
                response = self._client.chat.completions.create(**create_kwargs)
                elapsed = time.time() - start_time
                logger.info(f"[LLM] [{request.task}] Response received in {elapsed:.2f}s")
                return response

            except Exception as exc:
                status = getattr(exc, "status_code", None)
                exc_str = str(exc)
                can_retry = attempt < max_retries - 1
                delay = min(base_delay * (2 ** attempt), max_delay)

                is_rate_limit = (
                    (RateLimitError is not None and isinstance(exc, RateLimitError))
                    or status == 429
                    or "429" in exc_str
                    or "rate limit" in exc_str.lower()
                )
                if is_rate_limit:
                    if can_retry:
                        logger.warning(
                            f"429 Rate limited (attempt {attempt + 1}/{max_retries}). Retrying in {delay:.1f}s..."
                        )
                        time.sleep(delay)
                        continue
                    raise ValueError(self._format_client_error(429, exc, request.task)) from exc

                is_timeout = (
                    APITimeoutError is not None and isinstance(exc, APITimeoutError)
                ) or "timeout" in exc_str.lower()
                if is_timeout:
                    if can_retry:
                        logger.warning(
                            f"Request timeout (attempt {attempt + 1}/{max_retries}). Retrying in {delay:.1f}s..."
                        )
                        time.sleep(delay)
                        continue
                    raise ValueError(
                        f"[{request.task}] Request timeout after {max_retries} attempts"
                    ) from exc

                if "valid model ID" in exc_str:
                    raise ValueError(
                        f"[{request.task}] Invalid model id for current provider. "
                        f"Please set {DEFAULT_MODEL_ENV_VAR} to a valid model id (current: {self._model})."
                    ) from exc

                is_api_status_error = (
                    APIStatusError is not None and isinstance(exc, APIStatusError)
                ) or status is not None
                if is_api_status_error and status is not None:
                    if status >= 500:
                        if can_retry:
                            logger.warning(
                                f"{status} Server error (attempt {attempt + 1}/{max_retries}). Retrying in {delay:.1f}s..."
                            )
                            time.sleep(delay)
                            continue
                        raise ValueError(self._format_client_error(status, exc, request.task)) from exc
                    if 400 <= status < 500:
                        raise ValueError(self._format_client_error(status, exc, request.task)) from exc

                if APIConnectionError is not None and isinstance(exc, APIConnectionError):
                    raise ValueError(
                        f"[{request.task}] Network error: could not reach {self._base_url}. Detail: {exc_str[:200]}"
                    ) from exc

                raise

        raise RuntimeError(f"[{request.task}] Max retries exceeded")

    def _read_response(self, response: Any, request: LLMRequest) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise ValueError(
                f"[{request.task}] Model returned an empty response. Check API key or quota."
            )
        choice = choices[0]
        message = getattr(choice, "message", None)
        content = _extract_text_content(getattr(message, "content", None)).strip()
        finish_reason = getattr(choice, "finish_reason", None)
        if not content and finish_reason == "content_filter":
            raise ValueError(
                f"[{request.task}] Response blocked by the provider's content filter. "
                "Try rephrasing the text or enabling unfiltered mode."
            )
        if not content:
            raise ValueError(
                f"[{request.task}] Model returned an empty response. Check API key or quota."
            )

        logger.info(f"[LLM] [{request.task}] Response: len={len(content)} chars")
        logger.debug(
            f"[LLM] [{request.task}] Raw output:\n{content[:500]}{'...' if len(content) > 500 else ''}"
        )
        return content

    def _format_client_error(self, status: int, exc: Exception, task: str) -> str:
        error_map = {
            400: "Bad request (400): the provider rejected the request parameters",
            401: f"Unauthorized (401): API Key is invalid or expired, check {self._config.api_key_env_var}",
            403: "Forbidden (403): no access to this model, check model permissions",
            404: f"Not found (404): model does not exist, check {DEFAULT_MODEL_ENV_VAR}",
            422: "Unprocessable entity (422): malformed request",
            429: "Rate limited (429): quota exhausted or too many requests, try again later",
            500: "Internal server error (500)",
            502: "Bad gateway (502)",
            503: "Service unavailable (503)",
            504: "Gateway timeout (504)",
        }
        desc = error_map.get(status, f"HTTP {status} error")
        detail = str(exc)
        return f"[{task}] {desc}. Detail: {detail[:200]}"

    @staticmethod
    def _resolve_api_key(config: OpenAIBackendConfig) -> str:
        if config.api_key:
            return config.api_key
        env_value = os.getenv(config.api_key_env_var, "").strip()
        if env_value:
            return env_value
        raise ValueError(
            f"Missing API key. Set {config.api_key_env_var} or pass api_key in OpenAIBackendConfig."
        )

    @staticmethod
    def _resolve_base_url(config: OpenAIBackendConfig) -> str:
        env_base_url = os.getenv(DEFAULT_BASE_URL_ENV_VAR, "").strip()
        if env_base_url and config.base_url == DEFAULT_BASE_URL:
            return env_base_url
        return config.base_url

    @staticmethod
    def _resolve_model(config: OpenAIBackendConfig) -> str:
        env_model = os.getenv(DEFAULT_MODEL_ENV_VAR, "").strip()
        if env_model and config.model == DEFAULT_MODEL:
            return env_model
        return config.model


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
    "DEFAULT_API_KEY_ENV_VAR",
    "DEFAULT_BASE_URL_ENV_VAR",
    "DEFAULT_MODEL_ENV_VAR",
    "OpenAIBackendConfig",
    "OpenAILLMModel",
]
