"""
Keyword controller for the translation relay.

Forwards one user message to the OpenAI chat-completions API with a fixed
instruction and turns whatever comes back into a plain-text reply. Every
failure is reported to the caller as text; nothing is retried.
"""
import logging
import time
from typing import Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI
from pydantic import ValidationError

from keyword_relay.api.models import (
    ChatMessage,
    RelayRequest,
    UpstreamChatRequest,
    UpstreamChatResponse,
)
from keyword_relay.config.settings import Settings
from keyword_relay.services.prompts import KEYWORD_SYSTEM_PROMPT, KEYWORD_TEMPERATURE

logger = logging.getLogger(__name__)

EMPTY_INPUT_ERROR = "エラー: 入力が空です。"
MISSING_API_KEY_ERROR = "エラー: APIキーが .env に設定されていません。"
CONNECTION_ERROR_PREFIX = "Connection Error: "
API_ERROR_PREFIX = "API Error: "
UNEXPECTED_RESPONSE_ERROR = "予期せぬエラーが発生しました。"


def create_openai_client(
    settings: Settings, http_client: Optional[httpx.AsyncClient] = None
) -> AsyncOpenAI:
    """Build the upstream client. Retries are disabled; one call per request."""
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout,
        max_retries=0,
        http_client=http_client,
    )


class KeywordController:
    """Controller for keyword extraction and translation."""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Owned by the app lifespan, which creates it only when a key is set
        if self._client is None:
            raise RuntimeError("Upstream client is not initialized; run the app with its lifespan")
        return self._client

    @staticmethod
    def parse_message(raw_body: bytes) -> str:
        """
        Extract the user message from a raw JSON body.

        Malformed JSON, a non-object body or a non-string ``message`` all
        yield an empty string rather than an error.
        """
        try:
            return RelayRequest.model_validate_json(raw_body or b"{}").message
        except ValidationError:
            return ""

    def build_upstream_request(self, message: str) -> UpstreamChatRequest:
        return UpstreamChatRequest(
            model=self.settings.openai_model,
            messages=[
                ChatMessage(role="system", content=KEYWORD_SYSTEM_PROMPT),
                ChatMessage(role="user", content=message),
            ],
            temperature=KEYWORD_TEMPERATURE,
        )

    @staticmethod
    def interpret_response(body_text: str) -> str:
        """
        Map an upstream response body to the reply text.

        Args:
            body_text: Raw upstream body, successful or not

        Returns:
            ``API Error: ...`` for error payloads, the trimmed content of the
            first choice on success, and a generic message for anything else.
        """
        try:
            payload = UpstreamChatResponse.model_validate_json(body_text)
        except ValidationError:
            logger.error("Upstream returned a body that is not a chat completion")
            return UNEXPECTED_RESPONSE_ERROR

        error_message = payload.error_message()
        if error_message is not None:
            logger.warning(f"Upstream API error: {error_message}")
            return API_ERROR_PREFIX + error_message

        content = payload.first_content()
        if content is None:
            logger.error("Upstream response has neither error nor choices")
            return UNEXPECTED_RESPONSE_ERROR

        return content.strip()

    async def handle(self, raw_body: bytes) -> str:
        """
        Run one relay cycle for a raw request body.

        Args:
            raw_body: Bytes posted by the chat UI, expected ``{"message": str}``

        Returns:
            Plain text for the response body, either the upstream answer or
            one of the error messages.
        """
        message = self.parse_message(raw_body)
        if not message.strip():
            logger.warning("Rejected request with empty input")
            return EMPTY_INPUT_ERROR

        if not self.settings.has_api_key:
            logger.error("OPENAI_API_KEY is not configured")
            return MISSING_API_KEY_ERROR

        upstream = self.build_upstream_request(message)
        start_time = time.perf_counter()

        try:
            raw = await self.client.chat.completions.with_raw_response.create(
                **upstream.model_dump()
            )
            body_text = raw.http_response.text
        except APIStatusError as e:
            # Error payloads come back with a non-2xx status
            body_text = e.response.text
        except APIConnectionError as e:
            description = str(e.__cause__) if e.__cause__ is not None else ""
            logger.error(f"Upstream transport error: {description or e.message}")
            return CONNECTION_ERROR_PREFIX + (description or e.message)

        reply = self.interpret_response(body_text)
        logger.info(
            f"Relay completed with model {upstream.model} "
            f"in {round((time.perf_counter() - start_time) * 1000, 2)} ms"
        )
        return reply
