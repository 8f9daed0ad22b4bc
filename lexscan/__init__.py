"""
lexscan - a configurable lexical scanner

Converts source text into a flat list of classified tokens (keywords,
symbols, identifiers, string/number literals, comments) tagged with their
character offset, length and line. The token vocabulary comes from a
caller-supplied language configuration rather than a built-in grammar.

Architecture:
    lexscan/
    ├── tokens.py       # Token kinds and payloads
    ├── config.py       # Language configuration
    ├── data.py         # Scan output record and dump
    ├── scanner.py      # Dispatch loop and sub-scanners
    ├── errors.py       # Scan errors and diagnostics
    ├── languages.py    # Built-in configurations (Lua)
    └── cli.py          # lexscan command

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .tokens import Token, TokenType, SourceLocation
from .config import ScannerConfig
from .data import ScannerData, ScannedToken
from .errors import ScanError, UnknownTokenError, UnexpectedEofError, ConfigError
from .scanner import Scanner, scan, scan_partial, scan_file
from .languages import LUA_CONFIG, get_language

__all__ = [
    # Core classes
    "Scanner",
    "ScannerConfig",
    "ScannerData",
    "ScannedToken",
    "Token",
    "TokenType",
    "SourceLocation",

    # Errors
    "ScanError",
    "UnknownTokenError",
    "UnexpectedEofError",
    "ConfigError",

    # Convenience functions
    "scan",
    "scan_partial",
    "scan_file",

    # Languages
    "LUA_CONFIG",
    "get_language",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
