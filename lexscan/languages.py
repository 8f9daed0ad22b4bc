"""
Built-in language configurations.

Symbol lists are ordered longest first, as the scanner expects.

Author: xwest
"""

from typing import Dict, List

from .config import ScannerConfig
from .errors import ConfigError


LUA_CONFIG = ScannerConfig(
    name="lua",
    keywords=(
        "and", "break", "do", "else", "elseif", "end", "false", "for", "function", "if", "in",
        "local", "nil", "not", "or", "repeat", "return", "then", "true", "until", "while",
    ),
    symbols=(
        "...", "..", "==", "~=", "<=", ">=", "+", "-", "*", "/", "%", "^", "#", "<", ">", "=",
        "(", ")", "{", "}", "[", "]", ";", ":", ",", ".",
    ),
    single_line_comment="--",
    multi_line_comment_start="--[[",
    multi_line_comment_end="]]",
)


_LANGUAGES: Dict[str, ScannerConfig] = {
    "lua": LUA_CONFIG,
}


def available_languages() -> List[str]:
    return sorted(_LANGUAGES)


def get_language(name: str) -> ScannerConfig:
    """Look up a built-in configuration by (case-insensitive) name."""
    try:
        return _LANGUAGES[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown language: {name!r}",
            help_text=f"Available languages: {', '.join(available_languages())}"
        ) from None
