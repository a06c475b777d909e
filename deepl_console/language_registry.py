"""
Supported languages, fetched once at startup and used to validate user input.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .config import FORMALITY_SUFFIX
from .translation_service import TranslationService


class RegistryLoadError(RuntimeError):
    """Raised when the language lists cannot be fetched."""


@dataclass(frozen=True)
class LanguageDescriptor:
    """A language supported by the service."""
    code: str
    name: str
    supports_formality: bool = False

    def describe(self) -> str:
        """Format the language for the language listing."""
        line = f"{self.name} ({self.code})"
        if self.supports_formality:
            line += FORMALITY_SUFFIX
        return line


def _find(languages: Iterable[LanguageDescriptor], code: Optional[str]) -> Optional[LanguageDescriptor]:
    if code is None:
        return None
    wanted = code.strip().upper()
    for language in languages:
        if language.code.upper() == wanted:
            return language
    return None


@dataclass(frozen=True)
class LanguageRegistry:
    """Source and target languages, read-only after construction."""
    source_languages: Tuple[LanguageDescriptor, ...] = ()
    target_languages: Tuple[LanguageDescriptor, ...] = ()

    def find_source(self, code: Optional[str]) -> Optional[LanguageDescriptor]:
        return _find(self.source_languages, code)

    def find_target(self, code: Optional[str]) -> Optional[LanguageDescriptor]:
        return _find(self.target_languages, code)

    def is_valid_source_code(self, code: Optional[str]) -> bool:
        return self.find_source(code) is not None

    def is_valid_target_code(self, code: Optional[str]) -> bool:
        return self.find_target(code) is not None


def _descriptors(languages: Iterable, with_formality: bool) -> Tuple[LanguageDescriptor, ...]:
    return tuple(
        LanguageDescriptor(
            code=language.code,
            name=language.name,
            supports_formality=bool(with_formality and language.supports_formality)
        )
        for language in languages
    )


def load_languages(service: TranslationService) -> LanguageRegistry:
    """Fetch both language lists and build the registry.

    Raises:
        RegistryLoadError: If either list cannot be fetched
    """
    sources = service.get_source_languages()
    if not sources.ok:
        raise RegistryLoadError(sources.error.message)

    targets = service.get_target_languages()
    if not targets.ok:
        raise RegistryLoadError(targets.error.message)

    registry = LanguageRegistry(
        source_languages=_descriptors(sources.value, with_formality=False),
        target_languages=_descriptors(targets.value, with_formality=True)
    )
    logging.info(f'Loaded {len(registry.source_languages)} source and '
                 f'{len(registry.target_languages)} target languages')
    return registry
