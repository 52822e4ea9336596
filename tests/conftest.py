import time
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from core.config import settings
from dependencies.services import get_conversation_store, get_llm_service
from main import app
from rag_services.llm import LLMService
from rag_services.state import ConversationStore


class FakeCompletions:
    """Stands in for ``client.chat.completions`` and remembers every call."""

    def __init__(self):
        self.calls = []
        self.reply = "Stay in touch with a shared playlist."
        self.error = None
        self.delay = 0.0

    def create(self, model, messages, **kwargs):
        self.calls.append({"model": model, "messages": messages, "kwargs": kwargs})
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def store():
    return ConversationStore(max_history=5)


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def llm_service(store, fake_openai):
    return LLMService("gpt-4o-mini-2024-07-18", store, client=fake_openai)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def client(store, llm_service, upload_dir):
    app.dependency_overrides[get_conversation_store] = lambda: store
    app.dependency_overrides[get_llm_service] = lambda: llm_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
