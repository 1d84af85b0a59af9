"""
Morph fast-apply adapter built on the OpenAI SDK.
"""

import logging
from typing import Any, Optional, cast

from openai import AsyncOpenAI, OpenAIError
from openai.types.chat import ChatCompletionMessageParam
from typing_extensions import override

from mcp_edit_service.config.settings import Settings
from mcp_edit_service.exceptions import RewriteError
from mcp_edit_service.ports.llm.rewrite_port import RewritePort


def build_apply_prompt(original_code: str, code_edit: str) -> str:
    """Compose the single user message understood by fast-apply models."""
    return f"<code>{original_code}</code>\n<update>{code_edit}</update>"


class MorphAdapter(RewritePort):
    """OpenAI-compatible implementation of the rewrite port."""

    def __init__(
        self,
        settings: Settings,
        client: Optional[AsyncOpenAI] = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the Morph adapter.

        Args:
            settings: Service settings carrying credential, endpoint and model
            client: Preconfigured client (built from settings if None)
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.model: str = settings.model
        self._settings = settings
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

        # Initialize OpenAI client
        self.client: AsyncOpenAI = client or AsyncOpenAI(
            api_key=settings.api_key, base_url=settings.base_url
        )

    def _prepare_messages(
        self, original_code: str, code_edit: str
    ) -> list[ChatCompletionMessageParam]:
        return cast(
            list[ChatCompletionMessageParam],
            [{"role": "user", "content": build_apply_prompt(original_code, code_edit)}],
        )

    def _extract_response_content(self, response: Any) -> Optional[str]:
        """
        Extract the first choice's message content.

        Args:
            response: The chat completion returned by the SDK

        Returns:
            The content, or None when the response carries none
        """
        choices = getattr(response, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        if message is None:
            return None
        return getattr(message, "content", None)

    @override
    async def rewrite(self, original_code: str, code_edit: str) -> Optional[str]:
        try:
            self._logger.info(
                f"Requesting fast apply from {self.model} "
                f"({len(original_code)} chars original, {len(code_edit)} chars edit)"
            )
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=self._prepare_messages(original_code, code_edit),
                stream=False,
            )
            return self._extract_response_content(response)
        except OpenAIError as e:
            raise RewriteError(f"Failed to generate updated code: {str(e)}")

    @override
    def get_model_info(self) -> dict[str, Any]:
        return self._settings.get_model_info()
