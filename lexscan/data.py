"""
Output record of a scan run.

ScannerData keeps the decoded source plus one entry per emitted token in
four parallel lists (kind, start offset, length, line). The lists only grow
through push(), so they always have the same length, even after a failed
run.

Author: xwest
"""

import sys
from dataclasses import dataclass
from typing import Iterator, List, TextIO

from .tokens import Token


@dataclass(frozen=True)
class ScannedToken:
    """Read-only view of one entry of a ScannerData."""
    index: int
    token: Token
    start: int
    length: int
    line: int

    @property
    def end(self) -> int:
        return self.start + self.length


class ScannerData:
    """
    Tokens produced by a scan, stored struct-of-arrays style.

    Offsets and lengths count characters (code points) of source, not
    bytes. A token's length covers its whole span, delimiters included:
    the string literal "ab" has content 'ab' and length 4.
    """

    def __init__(self):
        # complete decoded source code
        self.source: str = ""
        # resulting list of tokens
        self.token_types: List[Token] = []
        # token start offset in the source
        self.token_starts: List[int] = []
        # token length in characters
        self.token_lens: List[int] = []
        # line of the token's first character
        self.token_lines: List[int] = []

    def push(self, token: Token, start: int, length: int, line: int):
        """Append one token, keeping the four lists in lockstep."""
        self.token_types.append(token)
        self.token_starts.append(start)
        self.token_lens.append(length)
        self.token_lines.append(line)

    def clear(self):
        self.source = ""
        self.token_types.clear()
        self.token_starts.clear()
        self.token_lens.clear()
        self.token_lines.clear()

    def __len__(self) -> int:
        return len(self.token_types)

    def __getitem__(self, index: int) -> ScannedToken:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("token index out of range")
        return ScannedToken(
            index,
            self.token_types[index],
            self.token_starts[index],
            self.token_lens[index],
            self.token_lines[index],
        )

    def __iter__(self) -> Iterator[ScannedToken]:
        for i in range(len(self)):
            yield self[i]

    def tokens(self) -> List[Token]:
        return list(self.token_types)

    def lexeme(self, index: int) -> str:
        """Source text covered by token index (may be short for a partial token)."""
        start = self.token_starts[index]
        return self.source[start:start + self.token_lens[index]]

    def reconstruct(self) -> str:
        """Concatenate every token's source span, in order."""
        return "".join(self.lexeme(i) for i in range(len(self)))

    def dump(self, out: TextIO = None):
        """
        Write one human-readable line per token.

        Args:
            out: Text stream to write to (defaults to sys.stdout)
        """
        if out is None:
            out = sys.stdout
        for i, token in enumerate(self.token_types):
            out.write(f"[#{i:03} line {self.token_lines[i]}] {token}\n")

    def __repr__(self) -> str:
        return f"<ScannerData {len(self)} tokens, {len(self.source)} chars>"
