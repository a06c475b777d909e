"""
Pytest configuration and shared fixtures for all tests
"""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from deepl_console.language_registry import LanguageDescriptor, LanguageRegistry
from deepl_console.translation_service import TranslationService


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        self.clears = 0

    def read(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, *args):
        self.lines.append(" ".join(str(a) for a in args))

    def clear(self):
        self.clears += 1

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def registry():
    """Registry with a handful of real DeepL languages"""
    return LanguageRegistry(
        source_languages=(
            LanguageDescriptor("DE", "German"),
            LanguageDescriptor("EN", "English"),
            LanguageDescriptor("JA", "Japanese"),
        ),
        target_languages=(
            LanguageDescriptor("DE", "German", supports_formality=True),
            LanguageDescriptor("EN-US", "English (American)", supports_formality=False),
            LanguageDescriptor("PT-BR", "Portuguese (Brazilian)", supports_formality=True),
        ),
    )


@pytest.fixture
def mock_service():
    """TranslationService stand-in with no network access"""
    return Mock(spec=TranslationService)


@pytest.fixture
def deepl_client():
    """Mock of the deepl.Translator client"""
    client = Mock()
    client.get_source_languages.return_value = [
        SimpleNamespace(code="DE", name="German", supports_formality=None),
        SimpleNamespace(code="EN", name="English", supports_formality=None),
    ]
    client.get_target_languages.return_value = [
        SimpleNamespace(code="DE", name="German", supports_formality=True),
        SimpleNamespace(code="EN-GB", name="English (British)", supports_formality=False),
    ]
    return client


@pytest.fixture
def console_factory():
    return ScriptedConsole
