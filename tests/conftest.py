from __future__ import annotations

import logging

import pytest

from trendcast.sentiment import GeminiScorer


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("trendcast.tests")


@pytest.fixture
def offline_scorer() -> GeminiScorer:
    """Scorer that never reaches Gemini."""
    return GeminiScorer(enabled=False)


class FakeResponse:
    def __init__(self, text: str):
        self.text = text


class FakeGeminiClient:
    """Mimics GenerativeModel.generate_content for a canned reply or error."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate_content(self, prompt, generation_config=None):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text or "")


def attach_client(scorer: GeminiScorer, client: FakeGeminiClient) -> GeminiScorer:
    scorer._client = client
    scorer._initialized = True
    return scorer
