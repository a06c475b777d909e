"""
Configuration constants for the DeepL Translate console.
"""

from typing import Dict

# Environment file lookup
ENV_FILE_NAME: str = ".env"
ENV_PROBE_LEVELS: int = 4

# Fields read from the environment file
API_KEY_FIELD: str = "APIKey"
SERVER_URL_FIELD: str = "ServerURL"

# Logging
LOG_FORMAT: str = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL: str = "WARNING"

# Menu
MENU_TITLE: str = "DeepL Translate Console Edition"

MENU_OPTIONS: Dict[str, str] = {
    '1': 'Translate',
    '2': 'Translate a document',
    '3': 'Available characters this month with free API',
    '4': 'Languages',
    '5': 'Exit'
}

EXIT_OPTION: str = '5'

# Prompts
SOURCE_LANGUAGE_PROMPT: str = "Language you want to translate from: "
TARGET_LANGUAGE_PROMPT: str = "Language you want to translate to: "
TEXT_PROMPT: str = "Enter what you want to translate: "
INPUT_DOCUMENT_PROMPT: str = "Enter the document's name you want to translate (with extension): "
OUTPUT_DOCUMENT_PROMPT: str = "Enter the output document's name (with extension): "
RETURN_TO_MENU_PROMPT: str = "\nPress Enter to go back to main menu."

# Messages
LOADING_MESSAGE: str = "Loading..."
LIMIT_EXCEEDED_MESSAGE: str = "Translation limit exceeded."
FORMALITY_SUFFIX: str = " supports formality."
