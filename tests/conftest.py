"""
Shared test fixtures: fake Groq SDK objects and a canned settings value.
"""

from types import SimpleNamespace

import pytest

from config import RequestConfig, Settings, StylingMode


class FakeCompletions:
    """Stands in for ``Groq().chat.completions``."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def make_sdk_client(response=None, error=None):
    completions = FakeCompletions(response=response, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def make_completion(content):
    """Build an object shaped like a chat completion response."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class StubGenerationClient:
    """Pipeline-level stand-in for GenerationClient."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, model_id, prompt):
        self.calls.append((model_id, prompt))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def request_config(tmp_path) -> RequestConfig:
    return RequestConfig(
        name="user-card",
        description="shows a user avatar and name",
        styling_mode=StylingMode.TAILWIND,
        output_directory=str(tmp_path / "components"),
    )
