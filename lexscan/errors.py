"""
Error handling for the lexscan scanner.

A scan fails at most once: the first unknown character or the first
unterminated literal stops the run. Errors carry the source location of the
offending token and an IDE-friendly diagnostic.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Diagnostic attached to an error (message, location and hints)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    def render(self, source: str, filename: str = "<string>") -> str:
        """
        Render the diagnostic against the scanned source, gcc style.

        Args:
            source: Decoded source the location refers to
            filename: Name shown in front of the location

        Returns:
            Multi-line message with the offending line and a caret
        """
        if self.location is None:
            return f"{filename}: {self.severity}: {self.message}"

        loc = self.location
        lines = source.split("\n")
        text = lines[loc.line - 1] if loc.line - 1 < len(lines) else ""
        message = f"{filename}:{loc}: {self.severity}: {self.message}"
        message += f"\n{loc.line:5} | {text}"
        message += "\n      | " + " " * (loc.column - 1) + "^"
        if self.help_text:
            message += f"\n      = help: {self.help_text}"
        return message


# Error codes for categorization
ERROR_CODES = {
    "S001": "Unknown token",
    "S002": "Unexpected end of file",
    "C001": "Invalid language configuration",
}


class ScanError(Exception):
    """
    Base class for errors raised by a scan run.

    str() gives the short "line:offset : description" form, the full
    report is available through .diagnostic.
    """

    code = ""
    description = "scan error"

    def __init__(
        self,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(f"{location.line}:{location.offset} : {self.description}")
        self.location = location
        self.diagnostic = Diagnostic(
            message=self.description,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def column(self) -> int:
        return self.location.column

    def __eq__(self, other):
        if not isinstance(other, ScanError):
            return NotImplemented
        return type(self) is type(other) and self.location == other.location

    def __hash__(self):
        return hash((type(self), self.location))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line={self.line}, offset={self.offset})"


class UnknownTokenError(ScanError):
    """No classifier matched at the current position."""
    code = "S001"
    description = "unknown token"


class UnexpectedEofError(ScanError):
    """Input ended inside a string literal or a multi-line comment."""
    code = "S002"
    description = "unexpected end of file"


class ConfigError(ValueError):
    """Raised when a language configuration is malformed."""

    def __init__(self, message: str, help_text: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=None,
            severity="error",
            code="C001",
            help_text=help_text
        )


# Helper functions for creating common errors
def create_unknown_token_error(char: str, location: SourceLocation) -> UnknownTokenError:
    """Create an error for a character no classifier accepts."""
    if not char.isprintable():
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed here."
    elif not char.isascii() and char.isalpha():
        help_text = f"Identifiers are ASCII only, '{char}' may only appear in strings and comments."
    else:
        help_text = f"The character '{char}' is not a symbol of this language."

    return UnknownTokenError(location, help_text=help_text)


def create_unterminated_string_error(location: SourceLocation) -> UnexpectedEofError:
    """Create an error for a string literal cut off by the end of input."""
    return UnexpectedEofError(
        location,
        help_text="String literals must be closed with a matching '\"' quote.",
        suggestions=["Add a closing '\"' quote", "Check for an escaped closing quote"]
    )


def create_unterminated_comment_error(end_marker: str, location: SourceLocation) -> UnexpectedEofError:
    """Create an error for a multi-line comment cut off by the end of input."""
    return UnexpectedEofError(
        location,
        help_text=f"Multi-line comments must be closed with '{end_marker}'.",
        suggestions=[f"Add a closing '{end_marker}'", "Check nested comment markers are balanced"]
    )
