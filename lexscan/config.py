"""
Language configuration for the lexscan scanner.

The scanner has no built-in grammar: keywords, symbols and comment markers
all come from a ScannerConfig supplied by the caller.

Author: xwest
"""

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .errors import ConfigError
from .tokens import ALPHANUMERIC

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"name", "keywords", "symbols", "single_line_comment", "multi_line_comment"}


@dataclass(frozen=True)
class ScannerConfig:
    """
    Immutable description of a language's token vocabulary.

    The scanner picks the first keyword or symbol that matches at the
    current position, so when several entries share a prefix the longest
    one has to come first ("..." before ".." before "."). Use ordered()
    to get a copy sorted that way.
    """
    keywords: Tuple[str, ...] = ()
    symbols: Tuple[str, ...] = ()
    single_line_comment: Optional[str] = None
    multi_line_comment_start: Optional[str] = None
    multi_line_comment_end: Optional[str] = None
    name: str = field(default="<custom>", compare=False)

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "keywords", _as_tuple("keywords", self.keywords))
        object.__setattr__(self, "symbols", _as_tuple("symbols", self.symbols))
        self._validate()

    def _validate(self):
        for keyword in self.keywords:
            if not all(c in ALPHANUMERIC for c in keyword):
                raise ConfigError(
                    f"Invalid keyword {keyword!r}",
                    help_text="Keywords may only contain ASCII letters, digits and '_'."
                )

        for marker_name in ("single_line_comment", "multi_line_comment_start",
                            "multi_line_comment_end"):
            marker = getattr(self, marker_name)
            if marker is not None and (not isinstance(marker, str) or not marker):
                raise ConfigError(f"{marker_name} must be a non-empty string or None")

        if (self.multi_line_comment_start is None) != (self.multi_line_comment_end is None):
            raise ConfigError(
                "Multi-line comment markers must be given together",
                help_text="Set both multi_line_comment_start and multi_line_comment_end, or neither."
            )

    @property
    def has_multi_line_comments(self) -> bool:
        return self.multi_line_comment_start is not None

    def ordered(self) -> "ScannerConfig":
        """Return a copy whose keywords and symbols are sorted longest first."""
        return replace(
            self,
            keywords=tuple(sorted(self.keywords, key=len, reverse=True)),
            symbols=tuple(sorted(self.symbols, key=len, reverse=True)),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScannerConfig":
        """
        Build a configuration from its JSON shape.

        Args:
            data: Mapping with keywords, symbols, single_line_comment,
                multi_line_comment ([start, end]) and an optional name

        Returns:
            Validated configuration

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ConfigError("Language configuration must be a JSON object")

        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        multi = data.get("multi_line_comment")
        if multi is None:
            multi_start = multi_end = None
        elif isinstance(multi, (list, tuple)) and len(multi) == 2:
            multi_start, multi_end = multi
        else:
            raise ConfigError("multi_line_comment must be a [start, end] pair")

        return cls(
            keywords=data.get("keywords") or (),
            symbols=data.get("symbols") or (),
            single_line_comment=data.get("single_line_comment"),
            multi_line_comment_start=multi_start,
            multi_line_comment_end=multi_end,
            name=data.get("name", "<custom>"),
        )

    @classmethod
    def from_json_file(cls, filepath: str) -> "ScannerConfig":
        """Load a configuration from a JSON file (see from_dict)."""
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {filepath}: {e}") from e

        config = cls.from_dict(data)
        logger.debug("Loaded language %s from %s (%d keywords, %d symbols)",
                     config.name, filepath, len(config.keywords), len(config.symbols))
        return config

    def to_dict(self) -> Dict[str, Any]:
        multi = None
        if self.has_multi_line_comments:
            multi = [self.multi_line_comment_start, self.multi_line_comment_end]
        return {
            "name": self.name,
            "keywords": list(self.keywords),
            "symbols": list(self.symbols),
            "single_line_comment": self.single_line_comment,
            "multi_line_comment": multi,
        }


def _as_tuple(what: str, items: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(items, str):
        raise ConfigError(f"{what} must be a list of strings, not a string")
    result = tuple(items)
    for item in result:
        if not isinstance(item, str) or not item:
            raise ConfigError(f"{what} must only contain non-empty strings, got {item!r}")
    return result
