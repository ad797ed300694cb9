"""LLM Service - Structured-output calls to the configured model provider.

Offer drafting needs a JSON object with a fixed shape back from the model.
Callers describe that shape once as a JSON-Schema style dict (lowercase
``type`` names, ``properties``, ``required``, ``enum``, ``items``); each
provider translates it into its own structured-output option.

Interface Contract:
- call(prompt, json_mode, response_schema) -> str (raw text)
- All methods raise LLMServiceError on failure
- Callers should not depend on specific LLM provider details
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any

import google.generativeai as genai
from openai import OpenAI

from config import DEFAULT_MODEL, LLM_PROVIDER, OPENAI_MODEL

# Keys Gemini's Schema proto understands; anything else is dropped
GEMINI_SCHEMA_KEYS = ("type", "format", "description", "nullable", "enum", "properties", "required", "items")


class LLMServiceError(Exception):
    """Raised when LLM call fails."""
    pass


def to_gemini_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Translate a JSON-Schema style dict into Gemini's schema dialect.

    Type names are upper-cased (``"object"`` -> ``"OBJECT"``) and unsupported
    keys such as ``additionalProperties`` are removed, recursively.
    """
    converted: dict[str, Any] = {}
    for key in GEMINI_SCHEMA_KEYS:
        if key not in schema:
            continue
        value = schema[key]
        if key == "type":
            value = value.upper()
        elif key == "properties":
            value = {name: to_gemini_schema(sub) for name, sub in value.items()}
        elif key == "items":
            value = to_gemini_schema(value)
        converted[key] = value
    return converted


class BaseLLMService(ABC):
    """Abstract base class for LLM services."""

    @abstractmethod
    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call the LLM with a prompt.

        Args:
            prompt: The prompt to send to the LLM
            json_mode: If True, expect JSON response
            response_schema: Shape the JSON response must follow. Implies
                ``json_mode``.

        Returns:
            str: The LLM response text

        Raises:
            LLMServiceError: If the call fails
        """
        pass


class GeminiService(BaseLLMService):
    """Google Gemini LLM service implementation."""

    def __init__(self, model: str = DEFAULT_MODEL):
        self.model = model
        self._configured = False

    def _configure(self) -> None:
        """Configure Gemini API (lazy initialization)."""
        if self._configured:
            return
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
        if not api_key:
            raise LLMServiceError("GEMINI_API_KEY or GOOGLE_API_KEY environment variable not set")
        genai.configure(api_key=api_key)
        self._configured = True

    def _generation_config(self, json_mode: bool, response_schema: dict[str, Any] | None):
        if response_schema is not None:
            return genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=to_gemini_schema(response_schema),
            )
        if json_mode:
            return genai.GenerationConfig(response_mime_type="application/json")
        return None

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call Gemini model."""
        self._configure()
        try:
            gen_config = self._generation_config(json_mode, response_schema)
            model = genai.GenerativeModel(self.model)
            response = model.generate_content(prompt, generation_config=gen_config)
            text = response.text
        except Exception as e:
            raise LLMServiceError(f"Gemini call failed: {e}") from e
        if not text:
            raise LLMServiceError("Empty response from Gemini")
        return text


class OpenAIService(BaseLLMService):
    """OpenAI LLM service implementation."""

    def __init__(self, model: str = OPENAI_MODEL):
        self.model = model
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client (lazy initialization)."""
        if self._client is None:
            api_key = os.environ.get("OPENAI_API_KEY")
            if not api_key:
                raise LLMServiceError("OPENAI_API_KEY environment variable not set")
            self._client = OpenAI(api_key=api_key)
        return self._client

    def _response_format(self, json_mode: bool, response_schema: dict[str, Any] | None):
        if response_schema is not None:
            return {
                "type": "json_schema",
                "json_schema": {"name": "response", "schema": response_schema},
            }
        if json_mode:
            return {"type": "json_object"}
        return None

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call OpenAI model."""
        client = self._get_client()
        kwargs = {}
        response_format = self._response_format(json_mode, response_schema)
        if response_format:
            kwargs["response_format"] = response_format
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
            text = response.choices[0].message.content
        except Exception as e:
            raise LLMServiceError(f"OpenAI call failed: {e}") from e
        if not text:
            raise LLMServiceError("Empty response from OpenAI")
        return text


class LLMService:
    """Facade picking the provider named by ``LLM_PROVIDER``."""

    _instance: BaseLLMService | None = None

    @classmethod
    def get_instance(cls) -> BaseLLMService:
        """Get the configured LLM service instance."""
        if cls._instance is None:
            if LLM_PROVIDER == "openai":
                cls._instance = OpenAIService()
            else:
                cls._instance = GeminiService()
        return cls._instance

    @classmethod
    def set_instance(cls, service: BaseLLMService) -> None:
        """Set a custom LLM service (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        """Reset to default service."""
        cls._instance = None
