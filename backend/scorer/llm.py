"""
Text-generation capability used to rewrite candidate summaries.

Every generator MUST:
1. Implement generate(prompt) returning plain text
2. Raise TextGenerationError on failure
3. Bound every remote call with a timeout
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging
import os

import openai

from config import EnhancementConfig

logger = logging.getLogger(__name__)


class TextGenerationError(Exception):
    """Raised when a generator cannot produce text."""


class BaseTextGenerator(ABC):
    """Abstract text generator."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Raises:
            TextGenerationError: If no usable text was produced
        """
        raise NotImplementedError


class ChatCompletionGenerator(BaseTextGenerator):
    """Generator backed by the OpenAI chat completions API."""

    def __init__(self, api_key: str, settings: Optional[EnhancementConfig] = None, client=None):
        """
        Args:
            api_key: API key for the endpoint
            settings: Endpoint, model and sampling settings
            client: Optional preconfigured openai.OpenAI client
        """
        self.api_key = api_key
        self.settings = settings if settings is not None else EnhancementConfig()
        if client is None:
            client = openai.OpenAI(api_key=api_key, base_url=self.settings.api_url)
        self.client = client

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.settings.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                timeout=self.settings.timeout,
            )
        except openai.OpenAIError as e:
            raise TextGenerationError(f"Chat completion failed: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise TextGenerationError("Completion response has no choices")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise TextGenerationError("Completion content is empty")
        return content.strip()


def build_generator(settings: EnhancementConfig) -> Optional[BaseTextGenerator]:
    """
    Create the configured generator, or None when enhancement is off.

    Args:
        settings: Enhancement configuration

    Returns:
        ChatCompletionGenerator if enabled and an API key is set, else None
    """
    if not settings.enabled:
        return None
    api_key = os.environ.get(settings.api_key_env, "")
    if not api_key:
        logger.warning(f"Summary enhancement enabled but {settings.api_key_env} is not set")
        return None
    return ChatCompletionGenerator(api_key, settings)
