"""
lexscan Scanner - turns source text into tokens

The scanner has a fixed dispatch order and no grammar of its own; the
keywords, symbols and comment markers come from a ScannerConfig. At each
position it tries, first match wins:

    end of input, comment, newline, whitespace, symbol, keyword,
    string, identifier, number

and fails with UnknownTokenError if nothing matches. Tokens go straight
into the ScannerData, so whatever was recognized before a failure is
still there afterwards (handy while the user is still typing).

Author: xwest
"""

import logging
from typing import Optional, Tuple, Union

from .config import ScannerConfig
from .data import ScannerData
from .errors import (
    ScanError, create_unknown_token_error, create_unterminated_string_error,
    create_unterminated_comment_error
)
from .tokens import (
    Token, TokenType, SourceLocation, IGNORE, NEWLINE, EOF,
    DIGITS, HEX_DIGITS, BINARY_DIGITS, is_digit, is_alpha, is_alphanumeric, is_space
)

logger = logging.getLogger(__name__)

Source = Union[str, bytes]

# Escape sequences translated inside string literals; any other escaped
# character is kept as is.
ESCAPE_SEQUENCES = {
    'n': '\n',
    't': '\t',
}

# prefix letter -> (base, valid digits, normalized prefix)
PREFIXED_BASES = {
    'x': (16, HEX_DIGITS, '0x'),
    'X': (16, HEX_DIGITS, '0x'),
    'b': (2, BINARY_DIGITS, '0b'),
    'B': (2, BINARY_DIGITS, '0b'),
}


class Scanner:
    """
    Cursor over one scan run.

    start is the first character of the token being read, current the next
    unread character and line the current (1-based) line. All three are
    reset by run(); use one Scanner per thread.
    """

    def __init__(self):
        self.start = 0
        self.current = 0
        self.line = 1

    def run(
        self,
        source: Source,
        config: ScannerConfig,
        data: Optional[ScannerData] = None,
        encoding: str = "utf-8"
    ) -> ScannerData:
        """
        Scan the whole source into data.

        Args:
            source: Source text, bytes are decoded with encoding first
            config: Language configuration, only read
            data: Output record, emptied first (a new one if None)
            encoding: Encoding used when source is bytes

        Returns:
            The populated output record

        Raises:
            UnknownTokenError: No token starts at some position
            UnexpectedEofError: A string or multi-line comment is not closed

        On error the tokens recognized so far, plus the partial or unknown
        token at the error position, stay in data.
        """
        if data is None:
            data = ScannerData()
        data.clear()
        data.source = source.decode(encoding) if isinstance(source, bytes) else source

        self.start = 0
        self.current = 0
        self.line = 1

        logger.debug("Scanning %d characters as %s", len(data.source), config.name)
        try:
            self._scan_all(data, config)
        except ScanError as e:
            logger.debug("Scan stopped after %d tokens: %r", len(data), e)
            raise

        logger.debug("Scanned %d tokens on %d lines", len(data), self.line)
        return data

    def _scan_all(self, data: ScannerData, config: ScannerConfig):
        while True:
            line = self.line
            token = self._scan_token(data, config)

            if token.type == TokenType.EOF:
                return
            if token.is_internal:
                # whitespace and newlines are skipped alike
                self.start = self.current
            else:
                self._add_token(token, line, data)

    def _add_token(self, token: Token, line: int, data: ScannerData):
        data.push(token, self.start, self.current - self.start, line)
        self.start = self.current

    def _scan_token(self, data: ScannerData, config: ScannerConfig) -> Token:
        """Classify the text at the current position."""
        source = data.source
        if self.current >= len(source):
            return EOF

        token = (self._scan_comment(data, config)
                 or self._scan_newline(source)
                 or self._scan_space(source)
                 or self._scan_symbol(source, config)
                 or self._scan_keyword(source, config)
                 or self._scan_string(data)
                 or self._scan_identifier(source)
                 or self._scan_number(source))
        if token is not None:
            return token

        char = source[self.current]
        location = self._location(source, self.current, self.line)
        data.push(Token.unknown(char), self.current, 1, self.line)
        raise create_unknown_token_error(char, location)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _scan_comment(self, data: ScannerData, config: ScannerConfig) -> Optional[Token]:
        # multi-line first: "--[[" also starts with "--"
        if (config.has_multi_line_comments
                and self._matches(data.source, config.multi_line_comment_start)):
            return self._scan_multi_line_comment(data, config)
        if (config.single_line_comment is not None
                and self._matches(data.source, config.single_line_comment)):
            return self._scan_single_line_comment(data.source)
        return None

    def _scan_single_line_comment(self, source: str) -> Token:
        # the newline itself is left to _scan_newline
        end = source.find('\n', self.current)
        if end == -1:
            end = len(source)
        self.current = end
        return Token.comment(source[self.start:end])

    def _scan_multi_line_comment(self, data: ScannerData, config: ScannerConfig) -> Token:
        source = data.source
        start_marker = config.multi_line_comment_start
        end_marker = config.multi_line_comment_end
        line = self.line

        self.current += len(start_marker)
        depth = 1
        in_string = False
        escape = False

        while self.current < len(source):
            c = source[self.current]
            if escape:
                escape = False
            elif c == '\\':
                escape = True
            elif c == '"':
                in_string = not in_string
            elif not in_string and self._matches(source, end_marker):
                self.current += len(end_marker)
                depth -= 1
                if depth == 0:
                    return Token.comment(source[self.start:self.current])
                continue
            elif not in_string and self._matches(source, start_marker):
                self.current += len(start_marker)
                depth += 1
                continue

            if c == '\n':
                self.line += 1
            self.current += 1

        data.push(Token.comment(source[self.start:]), self.start, len(source) - self.start, line)
        raise create_unterminated_comment_error(
            end_marker, self._location(source, self.start, line)
        )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _scan_newline(self, source: str) -> Optional[Token]:
        if source[self.current] == '\n':
            self.current += 1
            self.line += 1
            return NEWLINE
        return None

    def _scan_space(self, source: str) -> Optional[Token]:
        start = self.current
        while self.current < len(source) and is_space(source[self.current]):
            self.current += 1
        if start == self.current:
            return None
        return IGNORE

    # ------------------------------------------------------------------
    # Symbols and keywords
    # ------------------------------------------------------------------

    def _scan_symbol(self, source: str, config: ScannerConfig) -> Optional[Token]:
        for symbol in config.symbols:
            if self._matches(source, symbol):
                self.current += len(symbol)
                return Token.symbol(symbol)
        return None

    def _scan_keyword(self, source: str, config: ScannerConfig) -> Optional[Token]:
        for keyword in config.keywords:
            end = self.current + len(keyword)
            if (self._matches(source, keyword)
                    and (end >= len(source) or not is_alphanumeric(source[end]))):
                self.current = end
                return Token.keyword(keyword)
        return None

    def _matches(self, source: str, text: str) -> bool:
        """Check whether text occurs at the current position."""
        return source.startswith(text, self.current)

    # ------------------------------------------------------------------
    # Literals and identifiers
    # ------------------------------------------------------------------

    def _scan_string(self, data: ScannerData) -> Optional[Token]:
        source = data.source
        if source[self.current] != '"':
            return None

        line = self.line
        self.current += 1
        escape = False
        content = []

        while self.current < len(source):
            c = source[self.current]
            self.current += 1
            if escape:
                content.append(ESCAPE_SEQUENCES.get(c, c))
                escape = False
            elif c == '\\':
                escape = True
                continue
            elif c == '"':
                return Token.string(''.join(content))
            else:
                content.append(c)

            if c == '\n':
                self.line += 1

        # The partial token counts the missing closing quote in its length
        data.push(Token.string(''.join(content)), self.start, len(source) - self.start + 1, line)
        raise create_unterminated_string_error(self._location(source, self.start, line))

    def _scan_identifier(self, source: str) -> Optional[Token]:
        if not is_alpha(source[self.current]):
            return None
        start = self.current
        while self.current < len(source) and is_alphanumeric(source[self.current]):
            self.current += 1
        return Token.identifier(source[start:self.current])

    def _scan_number(self, source: str) -> Optional[Token]:
        if not is_digit(source[self.current]):
            return None

        if source[self.current] == '0':
            token = self._scan_prefixed_number(source)
            if token is not None:
                return token

        start = self.current
        self._skip_digits(source)
        if (self.current + 1 < len(source)
                and source[self.current] == '.'
                and is_digit(source[self.current + 1])):
            self.current += 1
            self._skip_digits(source)

        lexeme = source[start:self.current]
        return Token.number(lexeme, float(lexeme))

    def _scan_prefixed_number(self, source: str) -> Optional[Token]:
        """Scan 0x.../0b... literals; None if no digit follows the prefix."""
        prefix_pos = self.current + 1
        if prefix_pos >= len(source) or source[prefix_pos] not in PREFIXED_BASES:
            return None

        base, valid_digits, prefix = PREFIXED_BASES[source[prefix_pos]]
        end = prefix_pos + 1
        while end < len(source) and source[end] in valid_digits:
            end += 1
        if end == prefix_pos + 1:
            return None

        digits = source[prefix_pos + 1:end]
        self.current = end
        try:
            value = float(int(digits, base))
        except OverflowError:
            value = float('inf')
        return Token.number(prefix + digits, value)

    def _skip_digits(self, source: str):
        while self.current < len(source) and source[self.current] in DIGITS:
            self.current += 1

    @staticmethod
    def _location(source: str, offset: int, line: int) -> SourceLocation:
        line_start = source.rfind('\n', 0, offset) + 1
        return SourceLocation(line, offset - line_start + 1, offset)


def scan(source: Source, config: ScannerConfig, encoding: str = "utf-8") -> ScannerData:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code (str, or bytes in the given encoding)
        config: Language configuration

    Returns:
        Populated ScannerData

    Raises:
        ScanError: If scanning fails
    """
    return Scanner().run(source, config, encoding=encoding)


def scan_partial(
    source: Source, config: ScannerConfig, encoding: str = "utf-8"
) -> Tuple[ScannerData, Optional[ScanError]]:
    """
    Scan an editor buffer that may be incomplete.

    Never raises ScanError: the error, if any, is returned next to the
    tokens recognized up to it.
    """
    data = ScannerData()
    try:
        Scanner().run(source, config, data, encoding)
    except ScanError as e:
        return data, e
    return data, None


def scan_file(filepath: str, config: ScannerConfig, encoding: str = "utf-8") -> ScannerData:
    """
    Convenience function to scan a source file.

    Raises:
        ScanError: If scanning fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'rb') as f:
        raw = f.read()
    return scan(raw, config, encoding)
