from __future__ import annotations

import logging
import threading
import time
from typing import Optional, Protocol

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


class TextGenerationError(RuntimeError):
    """The text generator could not produce a completion."""


class TextGenerator(Protocol):
    def generate(self, prompt: str, *, temperature: float, max_output_tokens: int) -> str: ...


class GeminiTextGenerator:
    """Text generator backed by the Google Gemini API."""

    def __init__(self, api_key: str, model: str):
        self.api_key = api_key
        self.model = model
        self._client: Optional[genai.Client] = None
        self._client_lock = threading.Lock()

    def _get_client(self) -> genai.Client:
        # Built on first use so a missing key fails the call, not app startup.
        # Handlers run in a threadpool, so concurrent first calls share one client.
        if self._client is None:
            if not self.api_key:
                raise TextGenerationError("GEMINI_API_KEY not configured on server.")
            with self._client_lock:
                if self._client is None:
                    self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, *, temperature: float, max_output_tokens: int) -> str:
        client = self._get_client()
        t0 = time.perf_counter()
        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=max_output_tokens,
                ),
            )
        except Exception as e:
            raise TextGenerationError(f"{type(e).__name__}: {e}") from e

        text = (response.text or "").strip()
        logger.info(
            "Gemini %s responded in %.2fs (%d chars)",
            self.model,
            time.perf_counter() - t0,
            len(text),
        )
        logger.debug("Raw AI response: %s", text)
        return text
