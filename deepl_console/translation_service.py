"""
Translation service for the DeepL Translate console.

Wraps the DeepL SDK client. Every remote call returns a ServiceResult instead of
raising, so callers decide how each kind of failure is shown to the user.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, List, Optional, TypeVar, Union

import deepl

T = TypeVar('T')


@dataclass(frozen=True)
class DocumentHandle:
    """Identifies a document the service accepted for translation."""
    document_id: str
    document_key: str


@dataclass(frozen=True)
class ServiceError:
    """A failed remote call."""
    kind: str
    message: str
    document_handle: Optional[DocumentHandle] = None


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either the value of a successful call or the error of a failed one."""
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class UsageSnapshot:
    """Account usage at the time of the request."""
    any_limit_reached: bool
    character_count: Optional[int] = None
    summary: str = ""

    def __str__(self) -> str:
        return self.summary


def classify_error(error: Exception) -> str:
    """Map an exception raised around a DeepL call onto an error kind."""
    if isinstance(error, deepl.QuotaExceededException):
        return "quota_exceeded"
    if isinstance(error, deepl.AuthorizationException):
        return "authorization"
    if isinstance(error, deepl.ConnectionException):
        return "connection"
    if isinstance(error, deepl.DocumentTranslationException):
        return "document"
    if isinstance(error, OSError):
        return "file"
    if isinstance(error, ValueError):
        return "invalid_request"
    return "api"


def _failure(error: Exception, document_handle: Optional[DocumentHandle] = None) -> ServiceResult:
    kind = classify_error(error)
    logging.info(f'DeepL call failed ({kind}): {error}')
    return ServiceResult(error=ServiceError(kind=kind, message=str(error), document_handle=document_handle))


class TranslationService:
    """Handles translation operations using the DeepL API."""

    def __init__(self, api_key: str, server_url: Optional[str] = None, client: Optional[Any] = None):
        self.server_url = server_url
        self.client = client if client is not None else deepl.Translator(api_key, server_url=server_url)

    def get_source_languages(self) -> ServiceResult[List[deepl.Language]]:
        """Fetch the languages that can be translated from."""
        logging.info('Fetching source languages')
        try:
            return ServiceResult(value=list(self.client.get_source_languages()))
        except (deepl.DeepLException, OSError, ValueError) as e:
            return _failure(e)

    def get_target_languages(self) -> ServiceResult[List[deepl.Language]]:
        """Fetch the languages that can be translated to."""
        logging.info('Fetching target languages')
        try:
            return ServiceResult(value=list(self.client.get_target_languages()))
        except (deepl.DeepLException, OSError, ValueError) as e:
            return _failure(e)

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> ServiceResult[str]:
        """Translate a piece of text and return the translated string."""
        logging.info(f'Translating {len(text)} characters from {source_lang} to {target_lang}')
        try:
            result = self.client.translate_text(text, source_lang=source_lang, target_lang=target_lang)
        except (deepl.DeepLException, OSError, ValueError) as e:
            return _failure(e)

        logging.info('Translation completed successfully.')
        return ServiceResult(value=result.text)

    @staticmethod
    def _check_document_paths(input_path: Union[str, Path], output_path: Union[str, Path]) -> Optional[ServiceError]:
        """Reject paths the SDK would overwrite.

        The SDK truncates the output file and deletes it if the translation fails.
        """
        source = Path(input_path)
        target = Path(output_path)
        if not source.is_file():
            return ServiceError(kind="file", message=f"Input document '{source}' not found.")
        if target.resolve() == source.resolve():
            return ServiceError(kind="file", message="The output document must differ from the input document.")
        if target.exists():
            return ServiceError(kind="file", message=f"Output document '{target}' already exists.")
        return None

    def translate_document(self, input_path: Union[str, Path], output_path: Union[str, Path],
                           source_lang: str, target_lang: str) -> ServiceResult[Path]:
        """Translate a document file.

        Upload, polling and download are done by the SDK. If the document was
        uploaded before the failure, the error carries its handle so the result
        can be retrieved later.

        Args:
            input_path: Document to translate
            output_path: Where the translated document is written
            source_lang: Source language code
            target_lang: Target language code

        Returns:
            ServiceResult holding the output path on success
        """
        refusal = self._check_document_paths(input_path, output_path)
        if refusal is not None:
            logging.info(f'Refusing document translation: {refusal.message}')
            return ServiceResult(error=refusal)

        logging.info(f'Translating document {input_path} -> {output_path} ({source_lang} to {target_lang})')
        try:
            self.client.translate_document_from_filepath(
                input_path, output_path, source_lang=source_lang, target_lang=target_lang
            )
        except deepl.DocumentTranslationException as e:
            handle = None
            if e.document_handle is not None:
                handle = DocumentHandle(
                    document_id=e.document_handle.document_id,
                    document_key=e.document_handle.document_key
                )
                logging.info(f'Document {handle.document_id} was uploaded but translation did not complete')
            return _failure(e, handle)
        except (deepl.DeepLException, OSError, ValueError) as e:
            return _failure(e)

        logging.info(f'Document saved to {output_path}')
        return ServiceResult(value=Path(output_path))

    def get_usage(self) -> ServiceResult[UsageSnapshot]:
        """Fetch the account's usage statistics."""
        logging.info('Fetching account usage')
        try:
            usage = self.client.get_usage()
        except (deepl.DeepLException, OSError, ValueError) as e:
            return _failure(e)

        character = usage.character
        valid = character is not None and character.valid
        return ServiceResult(value=UsageSnapshot(
            any_limit_reached=usage.any_limit_reached,
            character_count=character.count if valid else None,
            summary=str(usage)
        ))
