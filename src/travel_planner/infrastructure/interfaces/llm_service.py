"""Abstract interface for LLM chat completions."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """
        Sends one chat turn and returns the raw reply, asked to be a JSON object.

        Args:
            system_prompt: Role instruction for the model.
            user_prompt: The task prompt.

        Returns:
            The message content of the first choice.

        Raises:
            LLMServiceError: If the LLM call fails or the reply is empty.
        """
        pass
