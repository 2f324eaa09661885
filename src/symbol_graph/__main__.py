# symbol_graph/__main__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Module entry point for the symbol indexer.

Allows running with: python -m symbol_graph path/to/src
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
