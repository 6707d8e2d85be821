"""OpenAI-compatible chat completion service (DeepSeek by default)."""

from openai import OpenAI, OpenAIError

from travel_planner.exceptions import LLMServiceError
from travel_planner.logging import setup_logging

from .interfaces import LLMService

logger = setup_logging()


class DeepSeekLLMService(LLMService):
    """LLM service implementation using the DeepSeek chat completions API."""

    def __init__(self, client: OpenAI, model_name: str):
        self._client = client
        self._model_name = model_name

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                stream=False,
            )
        except OpenAIError as e:
            logger.exception("Chat completion call failed")
            raise LLMServiceError(f"Chat completion failed: {e}", cause=e) from e

        if not response.choices:
            raise LLMServiceError("Chat completion returned no choices")

        content = (response.choices[0].message.content or "").strip()
        if not content:
            raise LLMServiceError("Chat completion returned empty content")

        logger.info(
            "Chat completion received",
            extra={"model": self._model_name, "chars": len(content)},
        )
        return content
