"""
Command-line interface for the DeepL Translate console.
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional

from .config import (
    LOG_FORMAT, DEFAULT_LOG_LEVEL, MENU_TITLE, MENU_OPTIONS, EXIT_OPTION,
    SOURCE_LANGUAGE_PROMPT, TARGET_LANGUAGE_PROMPT, TEXT_PROMPT,
    INPUT_DOCUMENT_PROMPT, OUTPUT_DOCUMENT_PROMPT, RETURN_TO_MENU_PROMPT,
    LOADING_MESSAGE, LIMIT_EXCEEDED_MESSAGE
)
from .language_registry import LanguageRegistry, RegistryLoadError, load_languages
from .translation_service import TranslationService
from .utils import ConfigurationError, load_settings


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.INFO if verbose else getattr(logging, DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def clear_screen() -> None:
    """Clear the terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description='Translate text and documents with the DeepL API from an interactive menu',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The API key is read from the APIKey field of a .env file in the current
directory or one of its parent directories. An optional ServerURL field
points the client at a different API server.

Examples:
  python main.py
  python main.py --env-file ~/deepl.env -v
        """
    )

    parser.add_argument('--env-file', dest='env_file', type=str,
                        help='Path to the .env file holding the API key')

    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true',
                        help='Log API calls to stderr')

    return parser


class ConsoleTranslator:
    """Interactive menu over the translation service."""

    def __init__(self, service: TranslationService, registry: LanguageRegistry,
                 read: Callable[[str], str] = input,
                 write: Callable[..., None] = print,
                 clear: Callable[[], None] = clear_screen):
        self.service = service
        self.registry = registry
        self.read = read
        self.write = write
        self.clear = clear

    def return_to_menu(self) -> None:
        self.read(RETURN_TO_MENU_PROMPT)

    def show_menu(self) -> None:
        self.clear()
        self.write(MENU_TITLE)
        self.write("\nChoose an option:\n")
        for option, label in MENU_OPTIONS.items():
            self.write(f"{option}) {label}")

    def handle_option(self, option: str) -> bool:
        """Run the handler for a menu option.

        Returns:
            False when the option ends the program, True otherwise
        """
        if option == EXIT_OPTION:
            return False

        handlers = {
            '1': self.translate_text,
            '2': self.translate_document,
            '3': self.show_usage,
            '4': self.show_languages,
        }
        handler = handlers.get(option)
        if handler is not None:
            handler()
        return True

    def run(self) -> None:
        """Show the menu until the user chooses to exit."""
        running = True
        while running:
            self.show_menu()
            try:
                option = self.read("\nOption: ")
            except EOFError:
                logging.info('Input closed, leaving menu')
                break
            running = self.handle_option(option)

    def prompt_language(self, prompt: str, is_valid: Callable[[str], bool]) -> str:
        """Ask for a language code until a supported one is entered."""
        code = self.read(prompt)
        while not is_valid(code):
            logging.info(f'Rejected language code: {code!r}')
            code = self.read(prompt)
        return code.strip()

    def prompt_language_pair(self) -> tuple[str, str]:
        """Ask for the source and target languages and return their canonical codes."""
        source = self.prompt_language(SOURCE_LANGUAGE_PROMPT, self.registry.is_valid_source_code)
        target = self.prompt_language(TARGET_LANGUAGE_PROMPT, self.registry.is_valid_target_code)
        return self.registry.find_source(source).code, self.registry.find_target(target).code

    def translate_text(self) -> None:
        """Translate a line of text entered by the user."""
        self.clear()
        source, target = self.prompt_language_pair()
        text = self.read(TEXT_PROMPT)

        result = self.service.translate_text(text, source, target)
        if result.ok:
            self.write(f"Translated text: {result.value}")
        else:
            self.write(f"ERROR: {result.error.message}")

        self.return_to_menu()

    def translate_document(self) -> None:
        """Translate a document file named by the user."""
        self.clear()
        source, target = self.prompt_language_pair()
        input_file = self.read(INPUT_DOCUMENT_PROMPT).strip()
        output_file = self.read(OUTPUT_DOCUMENT_PROMPT).strip()

        result = self.service.translate_document(input_file, output_file, source, target)
        if result.ok:
            self.write(f"Document translated: {result.value}")
        elif result.error.document_handle is not None:
            handle = result.error.document_handle
            self.write(f"Document ID: {handle.document_id}, Document key: {handle.document_key}")
        else:
            self.write(f"Error occurred during document upload: {result.error.message}")

        self.return_to_menu()

    def show_usage(self) -> None:
        """Display the account's usage for the current period."""
        self.clear()

        result = self.service.get_usage()
        if not result.ok:
            self.write(f"ERROR: {result.error.message}")
        elif result.value.any_limit_reached:
            self.write(LIMIT_EXCEEDED_MESSAGE)
        elif result.value.character_count is not None:
            self.write(f"Character usage: {result.value.character_count}")
        else:
            self.write(str(result.value))

        self.return_to_menu()

    def show_languages(self) -> None:
        """List the supported source and target languages."""
        self.clear()

        self.write("Source languages:\n")
        for language in self.registry.source_languages:
            self.write(language.describe())

        self.write("\nTarget languages:\n")
        for language in self.registry.target_languages:
            self.write(language.describe())

        self.return_to_menu()


def start(env_file: Optional[str] = None,
          read: Callable[[str], str] = input,
          write: Callable[..., None] = print,
          clear: Callable[[], None] = clear_screen) -> int:
    """Load configuration and languages, then run the menu.

    Returns:
        Process exit status
    """
    try:
        settings = load_settings(env_file)
        logging.info(f'Loaded API key from {settings.env_file}')
        service = TranslationService(settings.api_key, settings.server_url)

        write(LOADING_MESSAGE)
        registry = load_languages(service)
    except (ConfigurationError, RegistryLoadError) as e:
        logging.info(f'Startup failed: {e}')
        write(f"ERROR: {e}")
        try:
            read("\nPress Enter to exit.")
        except EOFError:
            pass
        return 1

    ConsoleTranslator(service, registry, read=read, write=write, clear=clear).run()
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI application."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        status = start(args.env_file)
    except (KeyboardInterrupt, EOFError):
        print()
        status = 0

    sys.exit(status)


if __name__ == '__main__':
    main()
