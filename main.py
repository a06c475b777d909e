#!/usr/bin/env python3
"""
DeepL Translate Console Edition

This script opens an interactive menu for translating text and documents with the DeepL API,
checking the account's character usage and listing the supported languages.

Usage:
    python main.py [--env-file PATH] [-v]

Examples:
    python main.py                           # Read APIKey from .env in this or a parent directory
    python main.py --env-file ~/deepl.env    # Use a specific .env file
    python main.py -v                        # Log API calls to stderr

Configuration:
    The API key is configured in a .env file as APIKey=your_key
    An optional ServerURL entry selects a different API server
"""

if __name__ == '__main__':
    from deepl_console.cli import main
    main()
