"""
DeepL Translate Console Package

This package provides an interactive console menu for the DeepL translation API.

Features:
- Text translation between any supported language pair
- Document translation (upload, remote conversion and download handled by DeepL)
- Account usage check
- Listing of supported source and target languages

The API key is read from the APIKey field of a .env file.
"""

from .cli import main, start, ConsoleTranslator
from .translation_service import (
    TranslationService,
    ServiceResult,
    ServiceError,
    DocumentHandle,
    UsageSnapshot
)
from .language_registry import (
    LanguageDescriptor,
    LanguageRegistry,
    RegistryLoadError,
    load_languages
)
from .utils import ConfigurationError, Settings, find_env_file, load_settings

__version__ = "1.0.0"

__all__ = [
    # Main entry points
    "main",
    "start",
    "ConsoleTranslator",

    # Core services
    "TranslationService",
    "ServiceResult",
    "ServiceError",
    "DocumentHandle",
    "UsageSnapshot",

    # Languages
    "LanguageDescriptor",
    "LanguageRegistry",
    "RegistryLoadError",
    "load_languages",

    # Configuration
    "ConfigurationError",
    "Settings",
    "find_env_file",
    "load_settings"
]
