# reviews/llm_client.py
import json
import logging
from dataclasses import dataclass

import requests
from django.conf import settings
from pydantic import ValidationError

from .prompts import (
    GENERATE_TESTS_TOOL,
    SUGGEST_REVIEW_TOOL,
    build_chat_payload,
    build_review_messages,
    build_test_messages,
)
from .schemas import ReviewResult, TestSuite

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base error for a failed gateway exchange. Surfaced to callers as 500."""

    status_code = 500


class ConfigurationError(GatewayError):
    pass


class RateLimited(GatewayError):
    status_code = 429

    def __init__(self, message="Rate limited"):
        super().__init__(message)


class PaymentRequired(GatewayError):
    status_code = 402

    def __init__(self, message="Payment required"):
        super().__init__(message)


class UpstreamError(GatewayError):
    def __init__(self, message="AI gateway error"):
        super().__init__(message)


class MissingToolCall(GatewayError):
    def __init__(self, message="No tool call in AI response"):
        super().__init__(message)


class MalformedUpstreamPayload(GatewayError):
    pass


@dataclass(frozen=True)
class GatewayConfig:
    api_key: str
    url: str
    model: str
    timeout: float = 120.0
    max_retries: int = 0

    @classmethod
    def from_settings(cls):
        return cls(
            api_key=settings.AI_GATEWAY_API_KEY,
            url=settings.AI_GATEWAY_URL,
            model=settings.AI_GATEWAY_MODEL,
            timeout=settings.AI_GATEWAY_TIMEOUT,
            max_retries=settings.AI_GATEWAY_MAX_RETRIES,
        )


class GatewayClient:
    """Chat-completion client that always forces a single tool call."""

    def __init__(self, config: GatewayConfig):
        self.config = config

    def _post(self, payload: dict) -> requests.Response:
        headers = {"Authorization": f"Bearer {self.config.api_key}", "Content-Type": "application/json"}
        attempts = 1 + max(0, self.config.max_retries)
        for attempt in range(1, attempts + 1):
            try:
                return requests.post(self.config.url, json=payload, headers=headers, timeout=self.config.timeout)
            except (requests.ConnectionError, requests.Timeout) as e:
                logger.warning("AI gateway network failure (attempt %d/%d): %s", attempt, attempts, e)
                if attempt == attempts:
                    raise UpstreamError() from e

    def call_tool(self, messages: list, tool: dict) -> dict:
        """Send ``messages`` forcing ``tool`` and return the parsed tool-call arguments."""
        if not self.config.api_key:
            raise ConfigurationError("AI_GATEWAY_API_KEY not configured")

        r = self._post(build_chat_payload(self.config.model, messages, tool))
        if r.status_code == 429:
            raise RateLimited()
        if r.status_code == 402:
            raise PaymentRequired()
        if not r.ok:
            logger.error("AI error: %s %s", r.status_code, r.text)
            raise UpstreamError()

        try:
            data = r.json()
        except ValueError as e:
            raise MalformedUpstreamPayload("AI gateway returned invalid JSON") from e

        try:
            tool_call = data["choices"][0]["message"]["tool_calls"][0]
        except (KeyError, IndexError, TypeError):
            raise MissingToolCall() from None
        if not tool_call:
            raise MissingToolCall()

        try:
            arguments = json.loads(tool_call["function"]["arguments"])
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedUpstreamPayload("Invalid tool call arguments in AI response") from e
        if not isinstance(arguments, dict):
            raise MalformedUpstreamPayload("Invalid tool call arguments in AI response")
        return arguments

    def review(self, code: str, language: str, review_type: str) -> ReviewResult:
        arguments = self.call_tool(build_review_messages(code, language, review_type), SUGGEST_REVIEW_TOOL)
        try:
            return ReviewResult.model_validate(arguments)
        except ValidationError as e:
            logger.error("suggest_review payload failed validation: %s", e)
            raise MalformedUpstreamPayload("Malformed suggest_review payload") from e

    def generate_tests(self, code: str, language: str) -> TestSuite:
        arguments = self.call_tool(build_test_messages(code, language), GENERATE_TESTS_TOOL)
        try:
            return TestSuite.model_validate(arguments)
        except ValidationError as e:
            logger.error("generate_tests payload failed validation: %s", e)
            raise MalformedUpstreamPayload("Malformed generate_tests payload") from e
