"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for OpenAI, Groq and a local
Ollama server. The rest of the application only ever sees an *invoker*:
a plain ``prompt -> completion`` callable, so parsing and rendering can be
exercised without network access.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List
from abc import ABC, abstractmethod

import groq
import httpx
import ollama
import openai

from config import (
    MODEL_PARAMS,
    OLLAMA_BASE_URL,
    PROVIDERS,
    LLM_PROVIDER,
    api_key_for_provider,
    get_model_for_provider,
)
from errors import InvocationError

log = logging.getLogger(__name__)

Invoker = Callable[[str], str]

# Everything the SDKs raise for unreachable / unauthorised / rejected calls
_PROVIDER_ERRORS = (
    openai.OpenAIError,
    groq.GroqError,
    ollama.ResponseError,
    httpx.HTTPError,
    ConnectionError,
)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to the LLM provider."""
        pass


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None):
        self.client = ollama.Client(host=host or OLLAMA_BASE_URL)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to Ollama."""
        response = self.client.chat(
            model=model,
            messages=messages,
            options={"temperature": MODEL_PARAMS["temperature"]},
        )
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None):
        api_key = api_key or api_key_for_provider("openai")
        if not api_key:
            raise InvocationError("OpenAI API key is required. Enter one or set OPENAI_API_KEY.")

        self.client = openai.OpenAI(api_key=api_key)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to OpenAI."""
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=MODEL_PARAMS["temperature"],
            max_tokens=MODEL_PARAMS["max_tokens"],
        )
        return LLMResponse(response.choices[0].message.content or "")


class GroqClient(LLMClient):
    """Groq client implementation (OpenAI-compatible chat API)."""

    def __init__(self, api_key: str | None = None):
        api_key = api_key or api_key_for_provider("groq")
        if not api_key:
            raise InvocationError("Groq API key is required. Enter one or set GROQ_API_KEY.")

        self.client = groq.Groq(api_key=api_key)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to Groq."""
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=MODEL_PARAMS["temperature"],
            max_tokens=MODEL_PARAMS["max_tokens"],
        )
        return LLMResponse(response.choices[0].message.content or "")


def get_llm_client(provider: str | None = None, api_key: str | None = None) -> LLMClient:
    """Factory function to get the client for a backend."""
    provider = (provider or LLM_PROVIDER).lower()

    if provider == "openai":
        return OpenAIClient(api_key)
    elif provider == "groq":
        return GroqClient(api_key)
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider} (expected one of {', '.join(PROVIDERS)})")


def make_invoker(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    client: LLMClient | None = None,
) -> Invoker:
    """
    Build a ``prompt -> completion`` callable for one request.

    The prompt goes out as a single user message. Any provider failure is
    re-raised as InvocationError; nothing is retried.
    """
    provider = (provider or LLM_PROVIDER).lower()
    client = client or get_llm_client(provider, api_key)
    model = model or get_model_for_provider(provider)

    def invoke(prompt: str) -> str:
        log.info("Calling %s model %s (%d prompt chars)", provider, model, len(prompt))
        try:
            rsp = client.chat(model=model, messages=[{"role": "user", "content": prompt}])
        except _PROVIDER_ERRORS as exc:
            raise InvocationError(f"{provider} request failed: {exc}") from exc
        return rsp.message.content

    return invoke
